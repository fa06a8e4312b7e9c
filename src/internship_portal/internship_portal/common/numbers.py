from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_one(value: float) -> float:
    """Round half-up to one decimal place (8.25 -> 8.3, not banker's 8.2)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> float:
    if not whole:
        return 0.0
    return round_one(part / whole * 100)


def mean(values) -> float:
    values = list(values)
    if not values:
        return 0.0
    return round_one(sum(values) / len(values))
