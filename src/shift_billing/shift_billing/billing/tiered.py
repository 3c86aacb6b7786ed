from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..common.money import round_cents, to_decimal
from ..core.enums import DayType
from ..rates.model import RateTier
from .model import RatedAllocation


def apply_tiers(total_hours: float, tiers: Sequence[RateTier], *, category: DayType) -> list[RatedAllocation]:
    """Consume total_hours against tiers in the order given.

    Each tier takes up to hours_in_tier (all that is left when unlimited).
    Iteration stops once nothing remains or right after an unlimited tier.
    When bounded tiers run out first the leftover hours are not billed.
    """

    remaining = to_decimal(total_hours)
    allocations: list[RatedAllocation] = []

    for tier in tiers:
        if remaining <= 0:
            break

        if tier.is_unlimited:
            tier_hours = remaining
        else:
            tier_hours = min(remaining, to_decimal(tier.hours_in_tier))

        allocations.append(
            RatedAllocation(
                tier=tier.tier_order,
                rate=tier.rate_per_hour,
                hours=float(tier_hours),
                subtotal=round_cents(tier_hours, tier.rate_per_hour),
                category=category,
            )
        )
        remaining -= tier_hours

        if tier.is_unlimited:
            break

    return allocations


def flat_allocation(hours: float, rate_cents: int, *, category: DayType, tier: int = 1) -> RatedAllocation:
    return RatedAllocation(
        tier=tier,
        rate=rate_cents,
        hours=hours,
        subtotal=round_cents(hours, rate_cents),
        category=category,
    )


def unbilled_hours(total_hours: float, allocations: Sequence[RatedAllocation]) -> float:
    billed = sum((to_decimal(a.hours) for a in allocations), Decimal(0))
    return float(max(Decimal(0), to_decimal(total_hours) - billed))
