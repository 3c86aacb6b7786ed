from __future__ import annotations

from ...core.enums import DayType
from ...rates.model import EmployeeRate
from ...shifts.model import Shift
from ..model import RatedAllocation
from ..tiered import flat_allocation
from .base import RateProvider


class EmployeeRateProvider(RateProvider):
    """Flat per-category rate of one employee; weekday shifts are split."""

    splits_weeknight = True

    def __init__(self, rate: EmployeeRate):
        self._rate = rate

    @property
    def rate(self) -> EmployeeRate:
        return self._rate

    def allocate(self, *, shift: Shift, category: DayType, hours: float) -> list[RatedAllocation]:
        return [flat_allocation(hours, self._rate.rate_for(category), category=category)]
