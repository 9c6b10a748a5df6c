"""
Human-facing rendering of evaluation results.
"""

import math
from decimal import Decimal

from quickcalc.config import DisplayConfig, display_config


def format_result(value: float, config: DisplayConfig = display_config) -> str:
    """
    Render a result the way the calculator displays it.

    Very small or very large magnitudes use exponent notation
    ("1.23456789e+9"); everything else is rounded to a fixed number of
    fraction digits with trailing zeros dropped ("1,234.5").
    """
    if not math.isfinite(value):
        return "∞"

    magnitude = abs(value)
    if magnitude != 0 and (
        magnitude < config.small_threshold or magnitude >= config.large_threshold
    ):
        return _to_exponential(value, config.exponent_digits)

    digits = config.max_fraction_digits
    # Start from the shortest repr so no digits beyond the float's precision appear
    rounded = Decimal(repr(round(value, digits)))
    text = format(rounded, ",f" if config.group_thousands else "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _to_exponential(value: float, digits: int) -> str:
    # Python pads the exponent ("e+09"); display it unpadded ("e+9")
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"
