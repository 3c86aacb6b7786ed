from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Rate category of a shift (or of part of a shift)."""

    WEEKDAY = "weekday"
    WEEKNIGHT = "weeknight"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    HOLIDAY = "holiday"


class BillingMode(str, Enum):
    """Which rate system prices the hours."""

    TIERED = "tiered"
    EMPLOYEE_RATE = "employee_rate"
