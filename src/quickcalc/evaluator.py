"""
Postfix evaluation and the public ``evaluate`` entry point.
"""

import math
import operator
from typing import Callable

from quickcalc.errors import DomainError, MalformedExpressionError
from quickcalc.lexer import tokenize
from quickcalc.postfix import to_postfix
from quickcalc.tokens import (
    CONSTANTS,
    FUNCTIONS,
    Constant,
    Function,
    Number,
    Operator,
    Percent,
    Token,
    UnaryMinus,
)

BINARY_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": math.pow,
}


def evaluate(text: str) -> float:
    """
    Evaluate a calculator expression such as "2sqrt(9)" or "45% of 120".

    An optional leading '=' is ignored. Returns a finite float or raises
    an EvalError subclass.
    """
    return eval_postfix(to_postfix(tokenize(text)))


def eval_postfix(tokens: list[Token]) -> float:
    """
    Evaluate a postfix token sequence with a single numeric stack.

    Raises MalformedExpressionError when an operator lacks operands or the
    sequence does not reduce to exactly one value, and DomainError when any
    step produces a non-finite result.
    """
    stack: list[float] = []

    def pop() -> float:
        if not stack:
            raise MalformedExpressionError("Invalid expression")
        return stack.pop()

    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Constant):
            stack.append(CONSTANTS[token.name])
        elif isinstance(token, UnaryMinus):
            stack.append(-pop())
        elif isinstance(token, Percent):
            stack.append(pop() / 100)
        elif isinstance(token, Function):
            arg = pop()
            stack.append(_checked(FUNCTIONS[token.name], arg))
        elif isinstance(token, Operator):
            b = pop()
            a = pop()
            stack.append(_checked(BINARY_OPERATIONS[token.symbol], a, b))
        else:
            raise MalformedExpressionError(f"Unexpected token in postfix sequence: {token!r}")

    if len(stack) != 1:
        raise MalformedExpressionError("Invalid expression")
    return stack[0]


def _checked(func: Callable[..., float], *args: float) -> float:
    """Apply ``func`` and insist on a finite real result."""
    try:
        value = func(*args)
    except (ValueError, OverflowError, ZeroDivisionError) as e:
        raise DomainError("Math domain error") from e
    if not math.isfinite(value):
        raise DomainError("Math domain error")
    return value
