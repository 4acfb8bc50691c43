"""Number rounding and formatting helpers. No engine imports."""

from __future__ import annotations

import math


def to_fixed(value: float, precision: int) -> float:
    """Round to ``precision`` decimal digits. Negative zero becomes 0.0."""
    return round(value, precision) + 0.0


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    """Clamp into [low, high]. Used to keep acos/asin arguments in range."""
    return max(low, min(high, value))


def format_number(value: float, precision: int, leading_zero: bool = True) -> str:
    """Render a number with at most ``precision`` decimals and no trailing zeros.

    2.50 → "2.5", 3.0 → "3", -0.0001 (precision 3) → "0".
    With leading_zero=False, 0.5 → ".5" and -0.5 → "-.5".
    """
    rounded = to_fixed(value, precision)
    if not math.isfinite(rounded):
        return str(rounded)
    if rounded == int(rounded):
        text = str(int(rounded))
    else:
        text = f"{rounded:.{precision}f}".rstrip("0").rstrip(".")
    if not leading_zero:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text
