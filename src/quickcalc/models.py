"""
Data models shared by the CLI and the HTTP API.
"""

from pydantic import BaseModel, Field


class EvaluateRequest(BaseModel):
    """Request body for evaluating an expression."""
    expression: str = Field(..., max_length=1000, description="Expression as typed, e.g. '45% of 120'")


class Evaluation(BaseModel):
    """
    Outcome of evaluating a user query.

    ``ok`` is False both for incomplete input (no error) and for failed
    evaluation (``error_kind`` and ``error`` set).
    """
    query: str
    expression: str
    ok: bool = False
    value: float | None = None
    formatted: str | None = None
    error_kind: str | None = None
    error: str | None = None


class RegistryInfo(BaseModel):
    """Names understood by the evaluator."""
    functions: list[str]
    constants: dict[str, float]
