from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import DayType
from .model import EmployeeRate, RateTier


class RateTierRepository(Protocol):
    def get_tiers(
        self,
        *,
        company_id: int,
        shift_type: str,
        day_type: DayType,
        shift_date: date,
    ) -> Sequence[RateTier]:
        """Tiers valid on shift_date, ascending by tier_order."""

        raise NotImplementedError


class EmployeeRateRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[EmployeeRate]:
        raise NotImplementedError
