"""
Decimal Utilities
tech_health/scoring/utils.py

Precision-safe decimal math for the scoring engine. Averages are quantised
to four places and percentages are rounded half-up, so results do not depend
on binary float rounding.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

FOUR_PLACES = Decimal("0.0001")


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: Sequence[Decimal]) -> Decimal:
    """
    Arithmetic mean, unquantised.

    Returns Decimal("0") for an empty sequence.
    """
    if not values:
        return Decimal("0")
    return sum(values, Decimal("0")) / Decimal(len(values))


def weighted_mean(values: List[Decimal], weights: List[Decimal]) -> Decimal:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Returns Decimal("0") if all weights are zero.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    total_weight = sum(weights, Decimal("0"))
    if total_weight == 0:
        return Decimal("0")

    numerator = sum((v * w for v, w in zip(values, weights)), Decimal("0"))
    return (numerator / total_weight).quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_percentage(score: Decimal, scale: Decimal = Decimal("4")) -> int:
    """Map a 0..scale score onto an integer 0..100."""
    return round_half_up(clamp(score / scale * Decimal("100")))
