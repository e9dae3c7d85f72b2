"""Evaluate postfix expressions with a value stack."""
import math
import re
from typing import List, Optional, Tuple

from expression_evaluator.common.errors import (
    IncompleteExpressionError,
    InvalidTokenError,
    MissingOperandsError,
)
from expression_evaluator.common.formatting import format_number
from expression_evaluator.common.logger import logger
from expression_evaluator.common.operators import apply_operator, is_operator

# Optional sign, digits with at most one decimal point, no exponent
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


class PostfixEvaluator:
    """
    Evaluate Reverse Polish Notation (RPN) expressions.

    Algorithm:
        1. Split the postfix string on whitespace
        2. Push numbers on a value stack
        3. For an operator, pop the right then the left operand and push the result
        4. Exactly one value must remain at the end
    """

    @staticmethod
    def _parse_number(token: str) -> Optional[float]:
        """
        Parse a culture-independent decimal literal.

        :param str token: Postfix token

        :return: The value, or None if the token is not a finite decimal number
        :rtype: Optional[float]
        """
        if not NUMBER_PATTERN.fullmatch(token):
            return None
        value: float = float(token)
        return value if math.isfinite(value) else None

    @staticmethod
    def evaluate(postfix: str) -> Tuple[float, List[str]]:
        """
        Evaluate a postfix expression and record every stack operation.

        :param str postfix: Space-separated postfix expression

        :return: Tuple of (result, trace)
        :rtype: Tuple[float, List[str]]
        :raises InvalidTokenError: If a token is neither a number nor an operator
        :raises MissingOperandsError: If an operator has fewer than two operands
        :raises IncompleteExpressionError: If zero or several values remain
        :raises DivisionByZeroError: If the right operand of '/' is zero
        """
        stack: List[float] = []
        steps: List[str] = []

        for token in postfix.split():
            number: Optional[float] = PostfixEvaluator._parse_number(token)
            if number is not None:
                stack.append(number)
                steps.append(f"Push: {format_number(number)}")

            elif is_operator(token):
                if len(stack) < 2:
                    raise MissingOperandsError(token)
                op2: float = stack.pop()
                op1: float = stack.pop()
                result: float = apply_operator(token, op1, op2)
                stack.append(result)
                steps.append(
                    f"Operation: {format_number(op1)} {token} {format_number(op2)} "
                    f"= {format_number(result)}"
                )

            else:
                raise InvalidTokenError(token)

        if len(stack) != 1:
            raise IncompleteExpressionError(len(stack))

        logger.debug(f"Evaluated postfix {postfix!r} in {len(steps)} steps")
        return stack[0], steps
