from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must be zero or greater, got {value!r}")
    return value


def require_positive_hours(value: Optional[Union[float, Decimal]], field_name: str) -> Optional[Union[float, Decimal]]:
    """None passes through (it means "unlimited")."""
    if value is not None and value <= 0:
        raise ValidationError(f"{field_name} must be greater than zero, got {value!r}")
    return value
