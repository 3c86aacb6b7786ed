from __future__ import annotations

import logging

from ...common.datetime_utils import parse_iso_date
from ...core.constants import DEFAULT_FALLBACK_RATE_CENTS
from ...core.enums import DayType
from ...rates.repository import RateTierRepository
from ...rates.validation import covers
from ...shifts.model import Shift
from ..model import RatedAllocation
from ..tiered import apply_tiers, flat_allocation, unbilled_hours
from .base import RateProvider

logger = logging.getLogger(__name__)


class TieredRateProvider(RateProvider):
    """Company rate tiers for (shift_type, day_type), or the fallback rate."""

    splits_weeknight = False

    def __init__(self, rate_tiers: RateTierRepository, *, fallback_rate_cents: int = DEFAULT_FALLBACK_RATE_CENTS):
        self._rate_tiers = rate_tiers
        self._fallback_rate_cents = int(fallback_rate_cents)

    def allocate(self, *, shift: Shift, category: DayType, hours: float) -> list[RatedAllocation]:
        tiers = list(
            self._rate_tiers.get_tiers(
                company_id=shift.company_id,
                shift_type=shift.shift_type,
                day_type=category,
                shift_date=parse_iso_date(shift.date),
            )
        )

        if not tiers:
            logger.debug(
                "no rate tiers for company=%s shift_type=%s day_type=%s, using fallback %s",
                shift.company_id,
                shift.shift_type,
                category.value,
                self._fallback_rate_cents,
            )
            return [flat_allocation(hours, self._fallback_rate_cents, category=category)]

        allocations = apply_tiers(hours, tiers, category=category)
        if not covers(tiers, hours):
            logger.warning(
                "rate tiers for company=%s shift_type=%s day_type=%s leave %.2f of %.2f hours unbilled (shift %s)",
                shift.company_id,
                shift.shift_type,
                category.value,
                unbilled_hours(hours, allocations),
                hours,
                shift.shift_id,
            )
        return allocations
