"""
Console entrypoint.

This script:
- Evaluates the expressions given as arguments, or three built-in samples
- Prints the infix form, the postfix form and the result of each
- Optionally prints the evaluation trace

Exits with status 1 if any expression fails.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from expression_evaluator.common.errors import DivisionByZeroError, ExpressionError
from expression_evaluator.common.formatting import format_number
from expression_evaluator.common.logger import logger
from expression_evaluator.engine.expression_evaluator import ExpressionEvaluator


SAMPLE_EXPRESSIONS: List[str] = [
    "4*5/(4+6)",
    "4*(5+6-(8/2^3)-7)-1",
    "123.89^(1.6/2.789)",
]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Infix expressions to evaluate.
    steps : bool
        Whether to print the evaluation trace.
    """

    expressions: List[str] = Field(default_factory=lambda: list(SAMPLE_EXPRESSIONS), min_length=1)
    steps: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Convert infix arithmetic expressions to postfix and evaluate them"
    )

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Infix expressions to evaluate (defaults to built-in samples)",
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print every push and operation performed during evaluation",
    )

    args = parser.parse_args(argv)

    try:
        if args.expressions:
            return CliArgs(expressions=args.expressions, steps=args.steps)
        return CliArgs(steps=args.steps)
    except ValidationError as exc:
        parser.error(str(exc))


def report(infix: str, show_steps: bool) -> bool:
    """
    Evaluate one expression and print its report block.

    :param str infix: Infix expression
    :param bool show_steps: Print the evaluation trace
    :return: True if the expression was evaluated successfully
    :rtype: bool
    """
    print(f"Infix: {infix}")
    print(f"Postfix: {ExpressionEvaluator.get_postfix_expression(infix)}")

    try:
        detailed = ExpressionEvaluator.evaluate_detailed(infix)
    except (ExpressionError, DivisionByZeroError) as exc:
        logger.error(f"❌ Could not evaluate {infix!r}: {exc}")
        print(f"Error: {exc}\n")
        return False

    if show_steps:
        print("Steps:")
        for step in detailed.steps:
            print(f"  {step}")
    print(f"Result: {format_number(detailed.result)}\n")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the ``expression-evaluator`` command.
    """
    cli_args = parse_args(argv)
    logger.info(f"🧮 Evaluating {len(cli_args.expressions)} expression(s)")

    # Evaluate everything before deciding the exit status
    outcomes = [report(infix, cli_args.steps) for infix in cli_args.expressions]
    return 0 if all(outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
