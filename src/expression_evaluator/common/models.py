"""Pydantic models for tokens and evaluation results."""
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    """Category of a lexical token."""

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token(BaseModel):
    """Single token scanned from an infix expression."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Token category")
    text: str = Field(..., min_length=1, description="Literal text of the token")


class EvaluationResult(BaseModel):
    """
    Outcome of a detailed evaluation.

    Built once per call and immutable afterwards. ``steps`` lists one entry per
    stack push and one per binary operation, in execution order.
    """

    model_config = ConfigDict(frozen=True)

    infix: str = Field(..., description="Original infix expression")
    postfix: str = Field(..., description="Derived postfix expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")
    steps: Tuple[str, ...] = Field(default=(), description="Evaluation trace")
