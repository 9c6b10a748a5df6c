"""
Token types and the fixed function/constant registries.

Tokens are small immutable value objects, one class per lexical kind.
The registries are read-only mappings shared by every evaluation.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Union

OperatorSymbol = Literal["+", "-", "*", "/", "^"]

OPERATOR_SYMBOLS = frozenset("+-*/^")


# =============================================================================
# Token kinds
# =============================================================================

@dataclass(frozen=True)
class Number:
    """A numeric literal."""
    value: float


@dataclass(frozen=True)
class Operator:
    """A binary infix operator."""
    symbol: OperatorSymbol


@dataclass(frozen=True)
class LeftParen:
    pass


@dataclass(frozen=True)
class RightParen:
    pass


@dataclass(frozen=True)
class Function:
    """A registered unary function, applied to the group that follows it."""
    name: str


@dataclass(frozen=True)
class Constant:
    """A registered named constant."""
    name: str


@dataclass(frozen=True)
class Percent:
    """Postfix percent: divides the preceding value by 100."""


@dataclass(frozen=True)
class UnaryMinus:
    """Prefix negation, split from binary ``-`` after lexing."""


Token = Union[Number, Operator, LeftParen, RightParen, Function, Constant, Percent, UnaryMinus]

LPAREN = LeftParen()
RPAREN = RightParen()
PERCENT = Percent()
UNARY_MINUS = UnaryMinus()
IMPLICIT_MULTIPLY = Operator("*")


# =============================================================================
# Registries
# =============================================================================

def _round_half_up(x: float) -> float:
    # Halves go toward positive infinity: round(2.5) == 3, round(-2.5) == -2
    r = math.floor(x)
    return float(r + 1 if x - r >= 0.5 else r)


FUNCTIONS: Mapping[str, Callable[[float], float]] = MappingProxyType({
    "sqrt": math.sqrt,
    "cbrt": math.cbrt,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "abs": math.fabs,
    "ln": math.log,
    "log": math.log10,
    "log2": math.log2,
    "exp": math.exp,
    "floor": lambda x: float(math.floor(x)),
    "ceil": lambda x: float(math.ceil(x)),
    "round": _round_half_up,
    "deg": math.degrees,
    "rad": math.radians,
})

CONSTANTS: Mapping[str, float] = MappingProxyType({
    "pi": math.pi,
    "tau": math.tau,
    "e": math.e,
    "phi": (1 + math.sqrt(5)) / 2,
})
