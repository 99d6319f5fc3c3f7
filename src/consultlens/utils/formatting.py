"""Percentages and number formatting shared by the aggregation modules."""

import math

from ..core.constants import DisplayConstants


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def percent_of(numerator: float, denominator: float) -> int:
    """Whole percent of numerator over denominator; 0 when there is no total."""
    if denominator <= 0:
        return 0
    if isinstance(numerator, int) and isinstance(denominator, int):
        # exact on integer counts: 29/200 -> 15
        return (200 * numerator + denominator) // (2 * denominator)
    return round_half_up(numerator / denominator * 100)


def format_compact(n: int) -> str:
    """Render 12345 as "12.3k"; values under 1000 are returned verbatim."""
    if n >= DisplayConstants.COMPACT_THRESHOLD:
        return f"{n / 1000:.1f}{DisplayConstants.COMPACT_SUFFIX}"
    return f"{n}"


def format_signed(n: int) -> str:
    return f"+{n}" if n >= 0 else f"{n}"
