from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Union

from ..billing.model import RatedAllocation, ShiftBilling, ShiftFailure
from ..common.money import to_decimal
from ..core.constants import SPLIT_DAY_TYPE
from ..core.enums import BillingMode, DayType

_BUCKETS = {
    DayType.WEEKDAY: "weekday",
    DayType.WEEKNIGHT: "weeknight",
    DayType.SATURDAY: "saturday",
    DayType.SUNDAY: "sunday",
    DayType.HOLIDAY: "public_holiday",
}


def _remainder_category(billing: ShiftBilling) -> DayType:
    if billing.billing:
        return billing.billing[-1].category
    try:
        return DayType(billing.day_type)
    except ValueError:
        return DayType.WEEKNIGHT if billing.day_type == SPLIT_DAY_TYPE else DayType.WEEKDAY


@dataclass(frozen=True)
class CategoryTotals:
    # Decimal keeps the fold exact, and therefore independent of order
    hours: Decimal = Decimal(0)
    amount: int = 0

    def add(self, hours: Union[float, Decimal], amount: int) -> "CategoryTotals":
        return CategoryTotals(hours=self.hours + to_decimal(hours), amount=self.amount + int(amount))

    def __add__(self, other: "CategoryTotals") -> "CategoryTotals":
        return CategoryTotals(hours=self.hours + other.hours, amount=self.amount + other.amount)


@dataclass(frozen=True)
class PeriodSummary:
    weekday: CategoryTotals = field(default_factory=CategoryTotals)
    weeknight: CategoryTotals = field(default_factory=CategoryTotals)
    saturday: CategoryTotals = field(default_factory=CategoryTotals)
    sunday: CategoryTotals = field(default_factory=CategoryTotals)
    public_holiday: CategoryTotals = field(default_factory=CategoryTotals)
    shift_count: int = 0

    @classmethod
    def empty(cls) -> "PeriodSummary":
        return cls()

    def bucket(self, category: DayType) -> CategoryTotals:
        return getattr(self, _BUCKETS[DayType(category)])

    @property
    def total_hours(self) -> Decimal:
        return sum((self.bucket(c).hours for c in _BUCKETS), Decimal(0))

    @property
    def total_amount(self) -> int:
        return sum(self.bucket(c).amount for c in _BUCKETS)

    def add_allocation(self, allocation: RatedAllocation) -> "PeriodSummary":
        name = _BUCKETS[allocation.category]
        return replace(self, **{name: getattr(self, name).add(allocation.hours, allocation.subtotal)})

    def add_unbilled_hours(self, category: DayType, hours: Decimal) -> "PeriodSummary":
        name = _BUCKETS[DayType(category)]
        return replace(self, **{name: getattr(self, name).add(hours, 0)})

    def add(self, billing: ShiftBilling) -> "PeriodSummary":
        """Fold one shift in: amounts per line category, all of total_hours.

        Hours the tiers did not cover still count, in the bucket of the
        shift's last line.
        """

        summary = self
        for allocation in billing.billing:
            summary = summary.add_allocation(allocation)

        billed = sum((to_decimal(a.hours) for a in billing.billing), Decimal(0))
        unbilled = to_decimal(billing.total_hours) - billed
        if unbilled > 0:
            summary = summary.add_unbilled_hours(_remainder_category(billing), unbilled)

        return replace(summary, shift_count=summary.shift_count + 1)

    def merge(self, other: "PeriodSummary") -> "PeriodSummary":
        return PeriodSummary(
            **{name: getattr(self, name) + getattr(other, name) for name in _BUCKETS.values()},
            shift_count=self.shift_count + other.shift_count,
        )

    def to_dict(self) -> dict:
        out: dict = {
            "total_hours": float(self.total_hours),
            "total_amount": self.total_amount,
            "shift_count": self.shift_count,
        }
        for name in _BUCKETS.values():
            totals = getattr(self, name)
            out[f"{name}_hours"] = float(totals.hours)
            out[f"{name}_amount"] = totals.amount
        return out


@dataclass(frozen=True)
class EmployeeReport:
    user_id: int
    start_date: date
    end_date: date
    mode: BillingMode
    summary: PeriodSummary
    shifts: tuple[ShiftBilling, ...]
    failures: tuple[ShiftFailure, ...] = ()

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "mode": self.mode.value,
            "period": {"start_date": self.start_date.isoformat(), "end_date": self.end_date.isoformat()},
            "summary": self.summary.to_dict(),
            "shifts": [s.to_dict() for s in self.shifts],
            "failures": [f.to_dict() for f in self.failures],
        }
