"""Headless model of the button-driven calculator display."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from expression_evaluator.common.errors import DivisionByZeroError, ExpressionError
from expression_evaluator.common.formatting import format_number
from expression_evaluator.common.logger import logger
from expression_evaluator.engine.expression_evaluator import ExpressionEvaluator

# Characters the keypad can produce
KEYPAD: str = "0123456789.^/*%+-()"


class CalculatorSession(BaseModel):
    """
    Editable input line of a keypad calculator.

    Lifecycle:
        - Keys append one character each to the display
        - Delete removes the last character, Clear empties the display
        - Equals evaluates the display and replaces it with the result
    """

    # Re-run validators whenever the display is reassigned
    model_config = ConfigDict(validate_assignment=True)

    display: str = Field(default="", description="Current contents of the input field")
    last_error: Optional[str] = Field(default=None, description="Message of the last failed evaluation")

    @field_validator("display")
    def display_must_use_keypad_characters(cls, v: str) -> str:
        """Ensure that the display only holds characters the keypad can produce."""
        invalid = sorted({char for char in v if char not in KEYPAD})
        if invalid:
            raise ValueError(f"Unsupported characters in display: {''.join(invalid)!r}")
        return v

    def press(self, key: str) -> None:
        """
        Append a keypad character to the display.

        :param str key: Single keypad character

        :raises ValueError: If ``key`` is not a keypad character
        """
        if len(key) != 1 or key not in KEYPAD:
            raise ValueError(f"Unsupported key: {key!r}")
        self.display += key

    def delete(self) -> None:
        """Remove the last character of the display, if any."""
        self.display = self.display[:-1]

    def clear(self) -> None:
        """Empty the display and forget the last error."""
        self.display = ""
        self.last_error = None

    def equals(self) -> Optional[float]:
        """
        Evaluate the display.

        On success the display shows the formatted result. On failure the
        display is kept for editing and ``last_error`` holds the message.

        :return: Computed result, or None if evaluation failed
        :rtype: Optional[float]
        """
        try:
            result: float = ExpressionEvaluator.evaluate(self.display)
        except DivisionByZeroError as exc:
            logger.info(f"🧮❌ Division by zero in {self.display!r}")
            self.last_error = f"Cannot divide by zero ({exc})"
            return None
        except ExpressionError as exc:
            logger.info(f"🧮❌ Invalid expression {self.display!r}: {exc}")
            self.last_error = f"Invalid expression ({exc})"
            return None

        self.last_error = None
        # Results such as "nan" or "-1e-05" cannot be typed back on the keypad
        formatted: str = format_number(result)
        if all(char in KEYPAD for char in formatted):
            self.display = formatted
        else:
            self.display = ""
        return result
