"""Human-readable rendering of numeric values."""
import math


def format_number(value: float) -> str:
    """
    Format a float with its shortest round-trip representation.

    Integral values drop the trailing ``.0`` so that ``2.0`` reads ``2``.

    :param float value: Value to format

    :return: Formatted value
    :rtype: str
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text: str = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text
