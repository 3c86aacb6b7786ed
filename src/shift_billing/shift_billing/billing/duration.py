from __future__ import annotations

from ..common.datetime_utils import TimeLike, minutes_since_midnight
from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError


def shift_span_minutes(start_time: TimeLike, end_time: TimeLike) -> tuple[int, int]:
    """(start, end) in minutes from the shift date's midnight.

    An end at or before the start is on the following day, so end may run
    past 1440. Equal times would read as a 24 hour shift under that rule;
    they are rejected instead.
    """

    start = minutes_since_midnight(start_time, "start_time")
    end = minutes_since_midnight(end_time, "end_time")
    if end == start:
        raise ValidationError(f"start_time and end_time are both {start_time!s}; zero-length shifts cannot be billed")
    if end < start:
        end += MINUTES_PER_DAY
    return start, end


def shift_duration_hours(start_time: TimeLike, end_time: TimeLike) -> float:
    start, end = shift_span_minutes(start_time, end_time)
    return (end - start) / 60
