from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import DayType


@dataclass(frozen=True)
class RateTier:
    """Company-wide hourly band for one (shift_type, day_type) group.

    hours_in_tier=None means the tier absorbs every remaining hour.
    """

    company_id: int
    shift_type: str
    day_type: DayType
    tier_order: int
    hours_in_tier: Optional[float]
    rate_per_hour: int
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None
    currency: str = DEFAULT_CURRENCY

    @property
    def is_unlimited(self) -> bool:
        return self.hours_in_tier is None

    def is_valid_on(self, shift_date: date) -> bool:
        if self.valid_from is not None and self.valid_from > shift_date:
            return False
        if self.valid_to is not None and self.valid_to < shift_date:
            return False
        return True


@dataclass(frozen=True)
class EmployeeRate:
    """Flat per-category rates of one employee, in cents per hour."""

    user_id: int
    company_id: int
    weekday_rate: int = 0
    weeknight_rate: int = 0
    saturday_rate: int = 0
    sunday_rate: int = 0
    public_holiday_rate: int = 0
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def zero(cls, user_id: int, company_id: int = 0) -> "EmployeeRate":
        return cls(user_id=user_id, company_id=company_id)

    def rate_for(self, category: DayType) -> int:
        return {
            DayType.WEEKDAY: self.weekday_rate,
            DayType.WEEKNIGHT: self.weeknight_rate,
            DayType.SATURDAY: self.saturday_rate,
            DayType.SUNDAY: self.sunday_rate,
            DayType.HOLIDAY: self.public_holiday_rate,
        }[DayType(category)]
