"""Entry points for converting and evaluating infix expressions."""
from typing import List, Tuple

from expression_evaluator.common.errors import DivisionByZeroError, ExpressionError
from expression_evaluator.common.logger import logger
from expression_evaluator.common.models import EvaluationResult
from expression_evaluator.engine.converter import InfixConverter
from expression_evaluator.engine.evaluator import PostfixEvaluator


class ExpressionEvaluator:
    """
    Evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Stateless: every call owns its stacks and trace

    Algorithm:
        1. Scan the infix string into tokens
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Examples:
        - Infix expression (standard notation): 4*5/(4+6)
        - Corresponding Reverse Polish Notation (RPN): 4 5 * 4 6 + /
        - Result: 2.0
    """

    @staticmethod
    def _run(infix: str) -> Tuple[str, float, List[str]]:
        postfix: str = InfixConverter.convert(infix)
        try:
            result, steps = PostfixEvaluator.evaluate(postfix)
        except (ExpressionError, DivisionByZeroError) as exc:
            logger.debug(f"Evaluation of {infix!r} failed: {exc}")
            raise
        return postfix, result, steps

    @staticmethod
    def evaluate(infix: str) -> float:
        """
        Convert an infix expression and evaluate it.

        :param str infix: Infix expression

        :return: Computed result
        :rtype: float
        :raises ExpressionError: If the expression is malformed
        :raises DivisionByZeroError: If a '/' has a zero right operand
        """
        return ExpressionEvaluator._run(infix)[1]

    @staticmethod
    def get_postfix_expression(infix: str) -> str:
        """
        Return the postfix form of an infix expression, for display.

        :param str infix: Infix expression

        :return: Space-separated postfix expression
        :rtype: str
        """
        return InfixConverter.convert(infix)

    @staticmethod
    def evaluate_detailed(infix: str) -> EvaluationResult:
        """
        Evaluate an infix expression and keep every intermediate artefact.

        :param str infix: Infix expression

        :return: Infix, postfix, result and evaluation trace
        :rtype: EvaluationResult
        :raises ExpressionError: If the expression is malformed
        :raises DivisionByZeroError: If a '/' has a zero right operand
        """
        postfix, result, steps = ExpressionEvaluator._run(infix)
        return EvaluationResult(infix=infix, postfix=postfix, result=result, steps=tuple(steps))
