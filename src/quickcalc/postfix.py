"""
Infix to postfix conversion (shunting-yard).

Uses an explicit output queue and operator stack instead of recursion, so
deeply nested input costs memory proportional to its length and nothing
more.
"""

from quickcalc.errors import ExpressionSyntaxError
from quickcalc.tokens import (
    Constant,
    Function,
    LeftParen,
    Number,
    Operator,
    Percent,
    RightParen,
    Token,
    UnaryMinus,
)

BINARY_PRECEDENCE = {
    "^": 4,
    "*": 3,
    "/": 3,
    "+": 2,
    "-": 2,
}
UNARY_MINUS_PRECEDENCE = 5
PERCENT_PRECEDENCE = 6


def precedence(token: Token) -> int:
    """Binding strength of an operator-class token; 0 for anything else."""
    if isinstance(token, Percent):
        return PERCENT_PRECEDENCE
    if isinstance(token, UnaryMinus):
        return UNARY_MINUS_PRECEDENCE
    if isinstance(token, Operator):
        return BINARY_PRECEDENCE[token.symbol]
    return 0


def is_right_associative(token: Token) -> bool:
    return isinstance(token, UnaryMinus) or (
        isinstance(token, Operator) and token.symbol == "^"
    )


def _is_operator(token: Token) -> bool:
    return isinstance(token, (Operator, UnaryMinus, Percent))


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Reorder infix tokens into postfix (Reverse Polish) order.

    Functions wait on the operator stack until the parenthesis that closes
    their argument, then follow it to the output. Percent is already postfix
    and goes straight to the output.

    Raises ExpressionSyntaxError on mismatched parentheses.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if isinstance(token, (Number, Constant, Percent)):
            output.append(token)
        elif isinstance(token, (Function, LeftParen)):
            stack.append(token)
        elif isinstance(token, (Operator, UnaryMinus)):
            prec = precedence(token)
            right = is_right_associative(token)
            while stack and _is_operator(stack[-1]):
                top_prec = precedence(stack[-1])
                if top_prec > prec or (top_prec == prec and not right):
                    output.append(stack.pop())
                else:
                    break
            stack.append(token)
        elif isinstance(token, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise ExpressionSyntaxError("Mismatched parentheses")
            stack.pop()
            if stack and isinstance(stack[-1], Function):
                output.append(stack.pop())

    while stack:
        token = stack.pop()
        if isinstance(token, (LeftParen, RightParen)):
            raise ExpressionSyntaxError("Mismatched parentheses")
        output.append(token)

    return output
