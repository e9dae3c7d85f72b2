"""Convert infix expressions to postfix notation."""
from typing import List

from expression_evaluator.common.logger import logger
from expression_evaluator.common.models import Token, TokenKind
from expression_evaluator.common.operators import precedence
from expression_evaluator.engine.tokenizer import tokenize


class InfixConverter:
    """
    Convert infix expressions into Reverse Polish Notation (RPN).

    The Shunting-yard algorithm keeps operators and opening parentheses on a
    stack and releases them to the output according to precedence.

    Rules:
        - Equal precedence pops the stack first, so every operator groups to
          the left, including '^': ``2^3^2`` reads as ``(2^3)^2``.
        - An unmatched ')' flushes operators down to the stack bottom and is
          otherwise ignored.
        - An unmatched '(' is emitted as-is at the end of the output, where
          evaluation rejects it.

    Examples:
        - Infix expression: 4*5/(4+6)
        - Postfix expression: 4 5 * 4 6 + /
    """

    @staticmethod
    def to_postfix(tokens: List[Token]) -> List[str]:
        """
        Reorder infix tokens into postfix order.

        :param List[Token] tokens: Tokens in infix order

        :return: Token texts in postfix order
        :rtype: List[str]
        """
        output: List[str] = []
        stack: List[Token] = []

        for token in tokens:
            if token.kind is TokenKind.NUMBER:
                output.append(token.text)

            elif token.kind is TokenKind.LEFT_PAREN:
                stack.append(token)

            elif token.kind is TokenKind.RIGHT_PAREN:
                while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                    output.append(stack.pop().text)
                # Discard the matching '(' if there is one
                if stack:
                    stack.pop()

            else:
                prec: int = precedence(token.text)
                while (
                    stack
                    and stack[-1].kind is not TokenKind.LEFT_PAREN
                    and prec <= precedence(stack[-1].text)
                ):
                    output.append(stack.pop().text)
                stack.append(token)

        # Remaining entries in reverse order (stack top first)
        output.extend(token.text for token in reversed(stack))
        return output

    @staticmethod
    def convert(infix: str) -> str:
        """
        Convert an infix expression into a space-separated postfix string.

        Never raises: unknown characters are skipped and parenthesis mismatches
        are left for evaluation to report.

        :param str infix: Infix expression

        :return: Postfix expression
        :rtype: str
        """
        postfix: str = " ".join(InfixConverter.to_postfix(tokenize(infix)))
        logger.debug(f"Converted {infix!r} to postfix {postfix!r}")
        return postfix
