from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    # str() keeps 7.5 as 7.5 rather than its binary expansion
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(hours: Number, rate_cents: int) -> int:
    """hours * rate rounded to a whole cent, halves away from zero."""
    amount = to_decimal(hours) * Decimal(int(rate_cents))
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_cents(amount_cents: int, currency: str = "AUD") -> str:
    """Plain "AUD 1,234.50" rendering for logs and the CLI.

    Locale-aware formatting belongs to the presentation layer.
    """
    sign = "-" if amount_cents < 0 else ""
    units = (Decimal(abs(int(amount_cents))) / 100).quantize(Decimal("0.01"))
    return f"{sign}{currency} {units:,}"
