"""
Tests for postfix evaluation and the evaluate entry point.
"""

import math

import pytest

from quickcalc import (
    DomainError,
    EvalError,
    ExpressionSyntaxError,
    LexError,
    MalformedExpressionError,
    eval_postfix,
    evaluate,
)
from quickcalc.tokens import PERCENT, UNARY_MINUS, Constant, Function, Number, Operator


class TestBasicArithmetic:
    """Test operators and precedence."""

    def test_simple_addition(self):
        assert evaluate("2 + 3") == 5

    def test_operator_precedence(self):
        assert evaluate("2+3*4") == 14

    def test_parentheses(self):
        assert evaluate("(2 + 3) * 4") == 20

    def test_division(self):
        assert evaluate("7 / 2") == 3.5

    def test_left_associative_subtraction(self):
        assert evaluate("10-4-3") == 3

    def test_right_associative_power(self):
        assert evaluate("2^3^2") == 512

    def test_unary_minus_binds_tighter_than_power(self):
        assert evaluate("-2^2") == 4

    def test_negative_exponent(self):
        assert evaluate("2^-1") == 0.5

    def test_minus_after_operator(self):
        assert evaluate("2*-3") == -6

    def test_double_negation_in_parens(self):
        assert evaluate("3-(-2)") == 5


class TestImplicitMultiplication:
    """Test juxtaposition and the "of" idiom."""

    def test_number_and_parentheses(self):
        assert evaluate("343*34(34)") == 343 * 34 * 34

    def test_adjacent_parentheses(self):
        assert evaluate("(1+2)(3+4)") == 21

    def test_number_and_function(self):
        assert evaluate("2sqrt(9)") == 6

    def test_number_and_constant(self):
        assert evaluate("2pi") == pytest.approx(2 * math.pi)

    def test_percent_of(self):
        assert evaluate("45% of 120") == pytest.approx(54)

    def test_number_of_number(self):
        assert evaluate("3 of 4") == 12

    def test_dangling_e(self):
        assert evaluate("2e") == pytest.approx(2 * math.e)


class TestPercent:
    """Test postfix percent."""

    def test_number_percent(self):
        assert evaluate("50%") == 0.5

    def test_group_percent(self):
        assert evaluate("(1+1)%") == pytest.approx(0.02)

    def test_percent_in_product(self):
        assert evaluate("200 * 10%") == pytest.approx(20)


class TestFunctionsAndConstants:
    """Test the registries."""

    def test_tau(self):
        assert evaluate("tau") == pytest.approx(2 * math.pi)

    def test_phi(self):
        assert evaluate("phi") == pytest.approx((1 + math.sqrt(5)) / 2)

    def test_e(self):
        assert evaluate("E") == pytest.approx(math.e)

    def test_log2(self):
        assert evaluate("log2(1024)") == 10

    def test_log10(self):
        assert evaluate("log(1000)") == pytest.approx(3)

    def test_ln(self):
        assert evaluate("ln(e)") == pytest.approx(1)

    def test_deg(self):
        assert evaluate("deg(pi)") == pytest.approx(180)

    def test_rad(self):
        assert evaluate("rad(90)") == pytest.approx(math.pi / 2)

    def test_trig(self):
        assert evaluate("sin(pi/2)") == pytest.approx(1)
        assert evaluate("cos(0)") == 1

    def test_cbrt(self):
        assert evaluate("cbrt(27)") == pytest.approx(3)

    def test_abs(self):
        assert evaluate("abs(-7.5)") == 7.5

    def test_floor_and_ceil(self):
        assert evaluate("floor(-1.5)") == -2
        assert evaluate("ceil(1.2)") == 2

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("round(2.5)", 3),
            ("round(-2.5)", -2),
            ("round(1.4)", 1),
            ("round(4503599627370497)", 4503599627370497),
            ("round(0.49999999999999994)", 0),
        ],
    )
    def test_round_halves_up(self, text, expected):
        assert evaluate(text) == expected

    def test_results_are_floats(self):
        assert isinstance(evaluate("floor(2.7)"), float)


class TestInputHandling:
    """Test the boundary behavior of evaluate."""

    def test_leading_equals_is_optional(self):
        assert evaluate("= 1 + 2") == 3

    def test_deterministic(self):
        for text in ["45% of 120", "sin(1)^2 + cos(1)^2", "phi^10 / sqrt(5)"]:
            assert evaluate(text) == evaluate(text)


class TestErrors:
    """Test failure kinds."""

    @pytest.mark.parametrize("text", ["(1+2", "1+2)"])
    def test_mismatched_parentheses(self, text):
        with pytest.raises(ExpressionSyntaxError):
            evaluate(text)

    @pytest.mark.parametrize(
        "text",
        ["1/0", "0/0", "sqrt(-1)", "log(0)", "asin(2)", "(-8)^(1/3)", "exp(1000)", "10^400", "1e308*10"],
    )
    def test_non_finite_results_raise_domain_error(self, text):
        with pytest.raises(DomainError):
            evaluate(text)

    @pytest.mark.parametrize("text", ["", "2+", "5 2", "(1)2", "--2", "sqrt()", "*3"])
    def test_malformed_expressions(self, text):
        with pytest.raises(MalformedExpressionError):
            evaluate(text)

    def test_unknown_identifier(self):
        with pytest.raises(LexError):
            evaluate("2 + x")

    def test_all_errors_share_a_base(self):
        for text in ["(1", "1/0", "2+", "foo"]:
            with pytest.raises(EvalError):
                evaluate(text)


class TestEvalPostfix:
    """Test the evaluator on hand-built postfix sequences."""

    def test_binary_operand_order(self):
        assert eval_postfix([Number(8.0), Number(2.0), Operator("/")]) == 4

    def test_unary_tokens(self):
        tokens = [Number(50.0), PERCENT, UNARY_MINUS]
        assert eval_postfix(tokens) == -0.5

    def test_function_and_constant(self):
        tokens = [Constant("pi"), Function("cos")]
        assert eval_postfix(tokens) == pytest.approx(-1)

    def test_underflow(self):
        with pytest.raises(MalformedExpressionError):
            eval_postfix([Operator("+")])

    def test_extra_values(self):
        with pytest.raises(MalformedExpressionError):
            eval_postfix([Number(1.0), Number(2.0)])

    def test_empty(self):
        with pytest.raises(MalformedExpressionError):
            eval_postfix([])
