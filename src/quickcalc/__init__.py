"""
QuickCalc - a small, safe calculator expression evaluator.

Turns human-typed expressions such as "2sqrt(9)", "45% of 120" or
"deg(pi)" into a single float, with implicit multiplication, postfix
percent and a fixed set of unary functions and constants.
"""

from quickcalc.errors import (
    DomainError,
    EvalError,
    ExpressionSyntaxError,
    LexError,
    MalformedExpressionError,
)
from quickcalc.evaluator import eval_postfix, evaluate
from quickcalc.lexer import tokenize
from quickcalc.postfix import to_postfix
from quickcalc.tokens import CONSTANTS, FUNCTIONS

__version__ = "1.0.0"

__all__ = [
    "CONSTANTS",
    "FUNCTIONS",
    "DomainError",
    "EvalError",
    "ExpressionSyntaxError",
    "LexError",
    "MalformedExpressionError",
    "eval_postfix",
    "evaluate",
    "to_postfix",
    "tokenize",
]
