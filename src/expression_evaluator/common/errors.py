"""Exceptions raised while evaluating postfix expressions."""
from expression_evaluator.common.formatting import format_number


class ExpressionError(ValueError):
    """Base class for malformed expressions detected during evaluation."""


class InvalidTokenError(ExpressionError):
    """A postfix token is neither a number nor a single operator character."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid token: {token}")


class MissingOperandsError(ExpressionError):
    """An operator was reached with fewer than two values on the stack."""

    def __init__(self, operator_symbol: str):
        self.operator_symbol = operator_symbol
        super().__init__(f"Invalid expression: missing operands for '{operator_symbol}'")


class IncompleteExpressionError(ExpressionError):
    """The stack does not hold exactly one value once all tokens are consumed."""

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(f"Incomplete expression: {remaining} value(s) left on the stack")


class DivisionByZeroError(ZeroDivisionError):
    """Right operand of '/' is exactly zero."""

    def __init__(self, dividend: float):
        self.dividend = dividend
        super().__init__(f"Division by zero: {format_number(dividend)} / 0")
