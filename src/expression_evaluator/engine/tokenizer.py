"""Scan infix expressions into tokens."""
import string
from typing import List

from expression_evaluator.common.models import Token, TokenKind
from expression_evaluator.common.operators import LEFT_PAREN, RIGHT_PAREN, is_operator

DECIMAL_POINT: str = "."
NUMBER_CHARS: str = string.digits + DECIMAL_POINT


def _scan_number(infix: str, start: int) -> int:
    """
    Return the index just past the number literal starting at ``start``.

    The run stops at the first character that is not a digit or at a second
    decimal point, so a literal never holds more than one decimal point.

    :param str infix: Infix expression
    :param int start: Index of the first digit or decimal point

    :return: End index (exclusive)
    :rtype: int
    """
    end: int = start
    seen_point: bool = False
    while end < len(infix) and infix[end] in NUMBER_CHARS:
        if infix[end] == DECIMAL_POINT:
            if seen_point:
                break
            seen_point = True
        end += 1
    return end


def tokenize(infix: str) -> List[Token]:
    """
    Split an infix expression into number, operator and parenthesis tokens.

    Whitespace separates nothing on its own: ``4*5`` and ``4 * 5`` give the
    same tokens. Characters that are neither digits, decimal points, operators
    nor parentheses are skipped.

    :param str infix: Infix expression

    :return: Tokens in input order
    :rtype: List[Token]
    """
    tokens: List[Token] = []
    i: int = 0
    while i < len(infix):
        char: str = infix[i]

        if char in NUMBER_CHARS:
            end: int = _scan_number(infix, i)
            tokens.append(Token(kind=TokenKind.NUMBER, text=infix[i:end]))
            i = end
            continue

        if char == LEFT_PAREN:
            tokens.append(Token(kind=TokenKind.LEFT_PAREN, text=char))
        elif char == RIGHT_PAREN:
            tokens.append(Token(kind=TokenKind.RIGHT_PAREN, text=char))
        elif is_operator(char):
            tokens.append(Token(kind=TokenKind.OPERATOR, text=char))
        # Whitespace and unknown characters fall through
        i += 1

    return tokens
