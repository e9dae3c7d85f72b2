"""Operator table and binary operation semantics."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, Dict, Tuple

from expression_evaluator.common.errors import DivisionByZeroError


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

LEFT_PAREN: str = "("
RIGHT_PAREN: str = ")"
PARENTHESES: Tuple[str, str] = (LEFT_PAREN, RIGHT_PAREN)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and value % 2 == 1


def divide(op1: float, op2: float) -> float:
    """
    Divide ``op1`` by ``op2``.

    :raises DivisionByZeroError: If ``op2`` is exactly zero
    """
    if op2 == 0:
        raise DivisionByZeroError(op1)
    return op1 / op2


def remainder(op1: float, op2: float) -> float:
    """
    Floating-point remainder with the sign of the dividend.

    A zero divisor or an infinite dividend yields ``nan`` instead of raising.
    """
    if op2 == 0 or math.isinf(op1):
        return math.nan
    return math.fmod(op1, op2)


def power(op1: float, op2: float) -> float:
    """
    Raise ``op1`` to the power ``op2`` following IEEE-754 ``pow``.

    ``math.pow`` raises where IEEE returns a value, these cases are mapped back:
    zero to a negative power gives an infinity, a negative base with a
    non-integer exponent gives ``nan``, and overflow gives an infinity.
    """
    try:
        return math.pow(op1, op2)
    except ValueError:
        if op1 == 0:
            # Keep the sign of -0.0 for odd exponents
            return math.copysign(math.inf, op1) if _is_odd_integer(op2) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if op1 < 0 and _is_odd_integer(op2) else math.inf


# Mapping of operator symbols to (precedence, function)
OPERATORS: Dict[str, Tuple[int, OperatorFn]] = {
    "^": (3, power),
    "*": (2, operator.mul),
    "/": (2, divide),
    "%": (2, remainder),
    "+": (1, operator.add),
    "-": (1, operator.sub),
}


def is_operator(symbol: str) -> bool:
    """Return True if ``symbol`` is exactly one recognized binary operator."""
    return symbol in OPERATORS


def precedence(symbol: str) -> int:
    """
    Return the binding strength of ``symbol``.

    Parentheses and unknown symbols have precedence 0.

    :param str symbol: Operator or parenthesis

    :return: Precedence level
    :rtype: int
    """
    return OPERATORS.get(symbol, (0,))[0]


def apply_operator(symbol: str, op1: float, op2: float) -> float:
    """
    Compute ``op1 <symbol> op2``.

    :param str symbol: Binary operator symbol
    :param float op1: Left operand
    :param float op2: Right operand

    :return: Result of the operation
    :rtype: float
    :raises KeyError: If ``symbol`` is not a recognized operator
    :raises DivisionByZeroError: If ``symbol`` is '/' and ``op2`` is zero
    """
    return OPERATORS[symbol][1](op1, op2)
