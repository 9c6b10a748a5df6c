"""
Tokenizer for calculator expressions.

Scans text left to right into a flat token list. Implicit multiplication
("2pi", "3(4+5)", "(1+2)(3+4)") and the "of" connective ("45% of 120")
are resolved here, so the parser only ever sees explicit operators.
"""

import math
import string

from quickcalc.errors import LexError
from quickcalc.tokens import (
    CONSTANTS,
    FUNCTIONS,
    IMPLICIT_MULTIPLY,
    LPAREN,
    OPERATOR_SYMBOLS,
    PERCENT,
    RPAREN,
    UNARY_MINUS,
    Constant,
    Function,
    LeftParen,
    Number,
    Operator,
    Percent,
    RightParen,
    Token,
)

DIGITS = frozenset(string.digits)
IDENT_START = frozenset(string.ascii_letters)
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

OF_KEYWORD = "of"


def normalize_input(text: str) -> str:
    """Strip surrounding whitespace and one optional leading '='."""
    text = text.strip()
    if text.startswith("="):
        text = text[1:]
    return text


def allows_implicit_multiply(prev: Token | None) -> bool:
    """Whether a value-starting token right after ``prev`` means multiplication."""
    return isinstance(prev, (Number, Constant, RightParen, Percent))


def tokenize(text: str) -> list[Token]:
    """
    Convert an expression string into tokens.

    Raises LexError on invalid numeric literals, unknown identifiers
    and unrecognized characters.
    """
    text = normalize_input(text)
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch in DIGITS or (ch == "." and _at(text, i + 1) in DIGITS):
            end = _scan_number(text, i)
            literal = text[i:end]
            value = float(literal)
            if not math.isfinite(value):
                raise LexError(f"Invalid number: {literal}", literal, i)
            tokens.append(Number(value))
            i = end
            if _at(text, i) == "%":
                tokens.append(PERCENT)
                i += 1
            continue

        if ch in OPERATOR_SYMBOLS:
            tokens.append(Operator(ch))
            i += 1
            continue

        if ch == "(":
            if allows_implicit_multiply(_last(tokens)):
                tokens.append(IMPLICIT_MULTIPLY)
            tokens.append(LPAREN)
            i += 1
            continue

        if ch == ")":
            tokens.append(RPAREN)
            i += 1
            if _at(text, i) == "%":
                tokens.append(PERCENT)
                i += 1
            continue

        if ch in IDENT_START:
            end = i
            while end < n and text[end] in IDENT_CHARS:
                end += 1
            ident = text[i:end].lower()
            implicit = allows_implicit_multiply(_last(tokens))

            if ident == OF_KEYWORD:
                # A bare "of" with nothing to scale is a no-op connective
                if implicit:
                    tokens.append(IMPLICIT_MULTIPLY)
            elif ident in FUNCTIONS:
                if implicit:
                    tokens.append(IMPLICIT_MULTIPLY)
                tokens.append(Function(ident))
            elif ident in CONSTANTS:
                if implicit:
                    tokens.append(IMPLICIT_MULTIPLY)
                tokens.append(Constant(ident))
            else:
                raise LexError(f"Unknown identifier: {ident}", text[i:end], i)
            i = end
            continue

        raise LexError(f"Unexpected character: {ch}", ch, i)

    return _mark_unary_minus(tokens)


def _scan_number(text: str, start: int) -> int:
    """Return the end index of the numeric literal starting at ``start``."""
    j = start
    while _at(text, j) in DIGITS:
        j += 1
    if _at(text, j) == ".":
        j += 1
        while _at(text, j) in DIGITS:
            j += 1

    # Only consume an exponent that actually has digits, so "2e" stays 2*e
    if _at(text, j) in ("e", "E"):
        k = j + 1
        if _at(text, k) in ("+", "-"):
            k += 1
        if _at(text, k) in DIGITS:
            j = k
            while _at(text, j) in DIGITS:
                j += 1
    return j


def _mark_unary_minus(tokens: list[Token]) -> list[Token]:
    out: list[Token] = []
    for token in tokens:
        if isinstance(token, Operator) and token.symbol == "-":
            prev = _last(out)
            if prev is None or isinstance(prev, (Operator, LeftParen, Function)):
                out.append(UNARY_MINUS)
                continue
        out.append(token)
    return out


def _at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _last(tokens: list[Token]) -> Token | None:
    return tokens[-1] if tokens else None
