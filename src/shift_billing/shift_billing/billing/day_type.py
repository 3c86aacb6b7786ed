from __future__ import annotations

from datetime import date
from typing import AbstractSet

from ..core.enums import DayType


def classify_day(shift_date: date, holidays: AbstractSet[date]) -> DayType:
    """Holiday beats Sunday beats Saturday; everything else is a weekday.

    Only the calendar date counts, never the time of day.
    """

    if shift_date in holidays:
        return DayType.HOLIDAY

    weekday = shift_date.weekday()  # Monday=0 .. Sunday=6
    if weekday == 6:
        return DayType.SUNDAY
    if weekday == 5:
        return DayType.SATURDAY
    return DayType.WEEKDAY
