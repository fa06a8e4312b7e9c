from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value.strip()) < min_len:
        raise ValidationError(f"{field_name} should be at least {min_len} characters long")
    return value.strip()


def require_present(value, field_name: str):
    if value is None:
        raise ValidationError(f"{field_name} is required")
    return value


def require_one_of(value, allowed: Iterable, field_name: str):
    allowed = tuple(allowed)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(str(a) for a in allowed)}")
    return value


def require_range(value: float, field_name: str, *, low: float, high: float) -> float:
    if value is None or value < low or value > high:
        raise ValidationError(f"{field_name} must be between {low:g} and {high:g}")
    return value


def require_decimal_places(value: float, field_name: str, places: int) -> float:
    if value is not None and Decimal(str(value)).as_tuple().exponent < -places:
        raise ValidationError(f"{field_name} allows at most {places} decimal places")
    return value
