"""
Exception hierarchy for expression evaluation.

Every failure raised by ``evaluate`` derives from EvalError, so callers
that only care about "result or no result" can catch the base class.
"""


class EvalError(Exception):
    """Base exception for evaluation errors."""

    kind = "error"


class LexError(EvalError):
    """Raised when the input contains a bad literal, identifier or character."""

    kind = "lex"

    def __init__(self, message: str, text: str = "", position: int = -1):
        super().__init__(message)
        self.text = text
        self.position = position


class ExpressionSyntaxError(EvalError):
    """Raised when parentheses do not balance."""

    kind = "syntax"


class MalformedExpressionError(EvalError):
    """Raised when the postfix sequence underflows or leaves extra values."""

    kind = "arithmetic"


class DomainError(EvalError):
    """Raised when an operation yields a non-finite value."""

    kind = "domain"
