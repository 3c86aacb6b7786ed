from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DayType
from ...shifts.model import Shift
from ..model import RatedAllocation


class RateProvider(ABC):
    """Strategy Pattern: how hours of one category are priced.

    splits_weeknight tells the calculator whether weekday shifts are cut at
    the weeknight threshold before pricing.
    """

    splits_weeknight: bool = False

    @abstractmethod
    def allocate(self, *, shift: Shift, category: DayType, hours: float) -> list[RatedAllocation]:
        raise NotImplementedError
