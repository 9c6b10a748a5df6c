"""
Query evaluation for interactive front ends.

Wraps ``evaluate`` with the "no result yet" policy: empty or incomplete
input and every evaluation failure produce an Evaluation with ok=False
instead of an exception, since the user is usually still typing.
"""

import structlog

from quickcalc.config import DisplayConfig, display_config
from quickcalc.errors import EvalError
from quickcalc.evaluator import evaluate
from quickcalc.formatting import format_result
from quickcalc.models import Evaluation

logger = structlog.get_logger()


def extract_expression(query: str) -> str:
    """Strip whitespace and an optional leading '=' from a raw query."""
    trimmed = query.strip()
    if trimmed.startswith("="):
        return trimmed[1:].strip()
    return trimmed


def compute(query: str, config: DisplayConfig = display_config) -> Evaluation:
    """Evaluate a raw query without raising."""
    expression = extract_expression(query)
    if not expression:
        return Evaluation(query=query, expression=expression)

    try:
        value = evaluate(expression)
    except EvalError as e:
        logger.debug(
            "Expression not evaluated",
            expression=expression,
            error_kind=e.kind,
            error=str(e),
        )
        return Evaluation(
            query=query,
            expression=expression,
            error_kind=e.kind,
            error=str(e),
        )

    logger.debug("Evaluated expression", expression=expression, result=value)
    return Evaluation(
        query=query,
        expression=expression,
        ok=True,
        value=value,
        formatted=format_result(value, config),
    )
