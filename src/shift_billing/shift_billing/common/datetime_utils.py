from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

TimeLike = Union[str, time]


def parse_iso_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def parse_hhmm(value: TimeLike, field_name: str = "time") -> time:
    """Parse a 24-hour "HH:MM" wall-clock value.

    A trailing ":SS" is accepted because MySQL TIME columns render that way,
    but seconds must be zero, for strings and time objects alike. Nothing
    is repaired: "24:00", "7:60" and friends are rejected.
    """

    if isinstance(value, time):
        if value.second or value.microsecond:
            raise ValidationError(f"{field_name} {value.isoformat()} has seconds, expected whole minutes")
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an HH:MM string, got {type(value).__name__}")

    m = _HHMM.match(value.strip())
    if not m:
        raise ValidationError(f"{field_name} {value!r} is not in HH:MM format")

    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds != 0:
        raise ValidationError(f"{field_name} {value!r} is out of range")
    return time(hour=hours, minute=minutes)


def minutes_since_midnight(value: TimeLike, field_name: str = "time") -> int:
    t = parse_hhmm(value, field_name)
    return t.hour * 60 + t.minute
