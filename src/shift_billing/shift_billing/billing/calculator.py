from __future__ import annotations

from dataclasses import replace
from datetime import time
from typing import AbstractSet

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_WEEKNIGHT_THRESHOLD
from ..core.enums import DayType
from ..shifts.model import Shift
from .day_type import classify_day
from .duration import shift_duration_hours
from .model import RatedAllocation, ShiftBilling
from .providers.base import RateProvider
from .weeknight import split_weekday_hours


class ShiftBillingCalculator:
    """Shift -> ShiftBilling for one request.

    Holds only read-only inputs, so one instance may be shared by worker
    threads billing different shifts.
    """

    def __init__(
        self,
        provider: RateProvider,
        holidays: AbstractSet,
        *,
        weeknight_threshold: time = DEFAULT_WEEKNIGHT_THRESHOLD,
    ):
        self._provider = provider
        self._holidays = frozenset(holidays)
        self._threshold = weeknight_threshold

    def calculate(self, shift: Shift) -> ShiftBilling:
        shift_date = parse_iso_date(shift.date)
        shift_type = require_non_empty(shift.shift_type, "shift_type")
        total_hours = shift_duration_hours(shift.start_time, shift.end_time)

        day_type = classify_day(shift_date, self._holidays)
        label = day_type.value
        segments = [(day_type, total_hours)]

        if day_type is DayType.WEEKDAY and self._provider.splits_weeknight:
            split = split_weekday_hours(shift.start_time, shift.end_time, self._threshold)
            label = split.day_type
            segments = split.segments()

        billing: list[RatedAllocation] = []
        for category, hours in segments:
            allocations = self._provider.allocate(shift=shift, category=category, hours=hours)
            if billing:
                # second segment of a split shift numbers on from the first
                offset = billing[-1].tier
                allocations = [replace(a, tier=a.tier + offset) for a in allocations]
            billing.extend(allocations)

        return ShiftBilling(
            shift_id=shift.shift_id,
            total_hours=total_hours,
            total_amount=sum(b.subtotal for b in billing),
            date=shift_date,
            day_type=label,
            shift_type=shift_type,
            billing=tuple(billing),
        )
