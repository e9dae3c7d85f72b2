"""Test class PostfixEvaluator."""
import math

import pytest

from expression_evaluator.common.errors import (
    DivisionByZeroError,
    ExpressionError,
    IncompleteExpressionError,
    InvalidTokenError,
    MissingOperandsError,
)
from expression_evaluator.engine.evaluator import PostfixEvaluator


@pytest.mark.parametrize("postfix,expected", [
    ("3 4 +", 7.0),
    ("10 2 -", 8.0),
    ("3 5 *", 15.0),
    ("8 2 /", 4.0),
    ("7 3 %", 1.0),
    ("2 10 ^", 1024.0),
    ("4 5 * 4 6 + /", 2.0),
    ("2 3 ^ 2 ^", 64.0),
    ("-1.5 +2 *", -3.0),   # signed literals are accepted
    ("5. .5 +", 5.5),
])
def test_evaluate_valid(postfix, expected):
    """Evaluate returns correct result for valid postfix expressions."""
    result, _ = PostfixEvaluator.evaluate(postfix)
    assert result == expected


def test_evaluate_records_trace():
    """Every push and operation is recorded in execution order."""
    _, steps = PostfixEvaluator.evaluate("4 5 * 4 6 + /")
    assert steps == [
        "Push: 4",
        "Push: 5",
        "Operation: 4 * 5 = 20",
        "Push: 4",
        "Push: 6",
        "Operation: 4 + 6 = 10",
        "Operation: 20 / 10 = 2",
    ]


def test_evaluate_trace_keeps_fractions():
    """Non-integral values are written in full."""
    _, steps = PostfixEvaluator.evaluate("1 4 /")
    assert steps[-1] == "Operation: 1 / 4 = 0.25"


def test_division_by_zero():
    """A zero right operand of '/' raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError):
        PostfixEvaluator.evaluate("5 0 /")


def test_division_by_zero_is_not_an_expression_error():
    """Division by zero is reported apart from malformed expressions."""
    with pytest.raises(ZeroDivisionError) as exc_info:
        PostfixEvaluator.evaluate("5 0.0 /")
    assert not isinstance(exc_info.value, ExpressionError)


@pytest.mark.parametrize("postfix", [
    "5 +",
    "+",
    "1 2 + *",
])
def test_missing_operands(postfix):
    """Operators without two operands raise MissingOperandsError."""
    with pytest.raises(MissingOperandsError):
        PostfixEvaluator.evaluate(postfix)


@pytest.mark.parametrize("postfix", [
    "5 3",
    "",
    "   ",
])
def test_incomplete_expression(postfix):
    """Anything but a single remaining value raises IncompleteExpressionError."""
    with pytest.raises(IncompleteExpressionError):
        PostfixEvaluator.evaluate(postfix)


@pytest.mark.parametrize("postfix,token", [
    ("1 2 + (", "("),
    ("1 x +", "x"),
    ("1e5", "1e5"),
    ("inf", "inf"),
    ("nan", "nan"),
    ("1.2.3", "1.2.3"),
    ("1 2 **", "**"),
    ("1_000", "1_000"),
])
def test_invalid_token(postfix, token):
    """Tokens that are neither decimal numbers nor operators are rejected."""
    with pytest.raises(InvalidTokenError) as exc_info:
        PostfixEvaluator.evaluate(postfix)
    assert exc_info.value.token == token


def test_errors_are_value_errors():
    """Malformed expressions raise ValueError subclasses."""
    with pytest.raises(ValueError):
        PostfixEvaluator.evaluate("5 3")


def test_remainder_by_zero_is_nan():
    """'%' by zero yields nan rather than raising."""
    result, _ = PostfixEvaluator.evaluate("5 0 %")
    assert math.isnan(result)


@pytest.mark.parametrize("postfix,expected", [
    ("7 -3 %", 1.0),
    ("-7 3 %", -1.0),
    ("5.5 2 %", 1.5),
])
def test_remainder_sign_follows_dividend(postfix, expected):
    """The remainder takes the sign of the dividend."""
    result, _ = PostfixEvaluator.evaluate(postfix)
    assert result == expected


def test_power_fractional_and_negative_exponents():
    """'^' supports fractional and negative exponents."""
    assert PostfixEvaluator.evaluate("9 0.5 ^")[0] == 3.0
    assert PostfixEvaluator.evaluate("2 -2 ^")[0] == 0.25


@pytest.mark.parametrize("postfix,expected", [
    ("0 -1 ^", math.inf),
    ("10 1000 ^", math.inf),
    ("-10 1001 ^", -math.inf),
])
def test_power_infinite_results(postfix, expected):
    """Poles and overflow give infinities instead of raising."""
    assert PostfixEvaluator.evaluate(postfix)[0] == expected


def test_power_domain_error_is_nan():
    """A negative base with a fractional exponent gives nan."""
    assert math.isnan(PostfixEvaluator.evaluate("-8 0.5 ^")[0])
