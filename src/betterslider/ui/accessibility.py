"""Accessibility value strings for assistive technologies."""

from betterslider.constants import ACCESSIBILITY_DECIMALS, RANGE_SEPARATOR
from betterslider.core.state import Selection


def format_number(value: float, decimals: int = ACCESSIBILITY_DECIMALS) -> str:
    """Compact number text: at most *decimals* places, no trailing zeros."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def accessibility_value(value: float, decimals: int = ACCESSIBILITY_DECIMALS) -> str:
    return format_number(value, decimals)


def range_accessibility_value(selection: Selection, decimals: int = ACCESSIBILITY_DECIMALS) -> str:
    """Spoken value of a range slider, e.g. ``"20 to 80"``."""
    return (
        format_number(selection.lower, decimals)
        + RANGE_SEPARATOR
        + format_number(selection.upper, decimals)
    )
