"""
Scoring Utilities
compass/scoring/utils.py

Float helpers for the score formulas, plus Decimal rounding for the values
that leave the system at fixed precision (trend percentages, export columns).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_half_up(value: float, places: int = 1) -> float:
    """Round half away from zero at the given precision."""
    return float(to_decimal(value, places))


def clamp(value: float, min_val: float = 0.0, max_val: float = 100.0) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def normalize(value: float, min_val: float, max_val: float) -> float:
    """
    Min-max normalize a value.

    Formula: (value - min) / (max - min)
    Returns 0.0 when max == min.
    """
    if max_val == min_val:
        return 0.0
    return (value - min_val) / (max_val - min_val)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Median of the values; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2
