"""Consistency checks for a rate tier group.

The calculator bills whatever tiers it is given, so these belong where tiers
are authored: a group that cannot cover a shift leaves hours unbilled.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_negative, require_positive_hours
from ..core.exceptions import TierConfigurationError, ValidationError
from .model import RateTier


def validate_tier_group(tiers: Sequence[RateTier]) -> list[RateTier]:
    """Return the group sorted by tier_order or raise TierConfigurationError."""

    if not tiers:
        return []

    keys = {(t.company_id, t.shift_type, t.day_type) for t in tiers}
    if len(keys) > 1:
        raise TierConfigurationError(f"Tier group mixes company/shift_type/day_type keys: {sorted(map(str, keys))}")

    ordered = sorted(tiers, key=lambda t: t.tier_order)
    seen: set[int] = set()
    for t in ordered:
        if t.tier_order in seen:
            raise TierConfigurationError(f"Duplicate tier_order {t.tier_order}")
        seen.add(t.tier_order)
        try:
            require_non_negative(t.rate_per_hour, f"rate_per_hour of tier {t.tier_order}")
            require_positive_hours(t.hours_in_tier, f"hours_in_tier of tier {t.tier_order}")
        except ValidationError as exc:
            raise TierConfigurationError(str(exc)) from exc

    unlimited = [t for t in ordered if t.is_unlimited]
    if len(unlimited) > 1:
        raise TierConfigurationError("At most one tier may have unlimited hours")
    if unlimited and unlimited[0] is not ordered[-1]:
        raise TierConfigurationError(
            f"Unlimited tier {unlimited[0].tier_order} must have the highest tier_order"
        )
    return ordered


def tier_capacity(tiers: Sequence[RateTier]) -> Optional[float]:
    """Total bounded hours, or None when an unlimited tier absorbs the rest."""
    if any(t.is_unlimited for t in tiers):
        return None
    return float(sum(t.hours_in_tier for t in tiers))


def covers(tiers: Sequence[RateTier], hours: float) -> bool:
    capacity = tier_capacity(tiers)
    return capacity is None or capacity >= hours
