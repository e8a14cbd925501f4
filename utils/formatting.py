"""Output formatting utilities for the dashboard table and stat cards.

Provides reusable functions for:
- Formatting measurements that may be unknown
- Formatting counts and averages for the stat cards
"""

from typing import Optional

from catalog.constants import UNKNOWN_LABEL
from catalog.models import Measurement


def format_distance(value: Measurement, precision: int = 2) -> str:
    """Format a distance in AU for display.

    Args:
        value: Known or Unknown distance
        precision: Decimal places (default: 2)

    Returns:
        Formatted string like "1.00", or "Unknown"

    Examples:
        format_distance(Known(1.0)) -> "1.00"
        format_distance(UNKNOWN) -> "Unknown"
    """
    if not value.is_known:
        return UNKNOWN_LABEL
    return f"{value.value:.{precision}f}"


def format_diameter(value: Measurement) -> str:
    """Format a diameter in km with thousands separators.

    Whole numbers drop the fraction; otherwise up to three fraction digits
    are kept.

    Examples:
        format_diameter(Known(12742)) -> "12,742"
        format_diameter(Known(4879.4)) -> "4,879.4"
        format_diameter(UNKNOWN) -> "Unknown"
    """
    if not value.is_known:
        return UNKNOWN_LABEL
    number = value.value
    if float(number).is_integer():
        return f"{int(number):,d}"
    return f"{number:,.3f}".rstrip("0").rstrip(".")


def format_average(value: Optional[float], precision: int = 2) -> str:
    """Format an average with a fixed number of fraction digits.

    Examples:
        format_average(5000) -> "5000.00"
        format_average(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:.{precision}f}"


def format_count(value: Optional[int]) -> str:
    """Format a count with thousands separator.

    Examples:
        format_count(1234567) -> "1,234,567"
        format_count(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:,d}"
