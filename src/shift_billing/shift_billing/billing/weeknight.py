from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import TimeLike, minutes_since_midnight
from ..core.constants import DEFAULT_WEEKNIGHT_THRESHOLD, SPLIT_DAY_TYPE
from ..core.enums import DayType
from .duration import shift_span_minutes


@dataclass(frozen=True)
class WeeknightSplit:
    weekday_hours: float
    weeknight_hours: float

    @property
    def total_hours(self) -> float:
        return self.weekday_hours + self.weeknight_hours

    @property
    def day_type(self) -> str:
        if self.weeknight_hours <= 0:
            return DayType.WEEKDAY.value
        if self.weekday_hours <= 0:
            return DayType.WEEKNIGHT.value
        return SPLIT_DAY_TYPE

    def segments(self) -> list[tuple[DayType, float]]:
        """Non-empty (category, hours) parts, weekday first."""
        parts = [(DayType.WEEKDAY, self.weekday_hours), (DayType.WEEKNIGHT, self.weeknight_hours)]
        return [(category, hours) for category, hours in parts if hours > 0]


def _weeknight_minutes(start: int, end: int, threshold: TimeLike) -> int:
    cutoff = minutes_since_midnight(threshold, "weeknight threshold")
    return max(0, end - max(start, cutoff))


def weeknight_hours(
    start_time: TimeLike,
    end_time: TimeLike,
    threshold: TimeLike = DEFAULT_WEEKNIGHT_THRESHOLD,
) -> float:
    """Hours of the shift at or after the threshold on the shift's timeline.

    Time past midnight keeps counting as weeknight: 22:00-06:00 is eight
    weeknight hours.
    """

    start, end = shift_span_minutes(start_time, end_time)
    return _weeknight_minutes(start, end, threshold) / 60


def split_weekday_hours(
    start_time: TimeLike,
    end_time: TimeLike,
    threshold: TimeLike = DEFAULT_WEEKNIGHT_THRESHOLD,
) -> WeeknightSplit:
    start, end = shift_span_minutes(start_time, end_time)
    night = _weeknight_minutes(start, end, threshold)
    return WeeknightSplit(weekday_hours=(end - start - night) / 60, weeknight_hours=night / 60)
