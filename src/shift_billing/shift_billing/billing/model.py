from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..core.enums import DayType


@dataclass(frozen=True)
class RatedAllocation:
    """One billed line of a shift: hours priced at a single rate.

    category says which rate bucket the hours belong to, so reports never
    have to guess it back from the rate.
    """

    tier: int
    rate: int
    hours: float
    subtotal: int
    category: DayType

    def to_dict(self) -> dict:
        return {
            "tier": self.tier,
            "rate": self.rate,
            "hours": self.hours,
            "subtotal": self.subtotal,
            "category": self.category.value,
        }


# Invoices and exports call the lines "billing tiers".
BillingTier = RatedAllocation


@dataclass(frozen=True)
class ShiftBilling:
    shift_id: Union[int, str]
    total_hours: float
    total_amount: int
    date: date
    day_type: str
    shift_type: str
    billing: tuple[RatedAllocation, ...]

    @property
    def billed_hours(self) -> float:
        return sum(b.hours for b in self.billing)

    def to_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "total_hours": self.total_hours,
            "total_amount": self.total_amount,
            "date": self.date.isoformat(),
            "day_type": self.day_type,
            "shift_type": self.shift_type,
            "billing": [b.to_dict() for b in self.billing],
        }


@dataclass(frozen=True)
class ShiftFailure:
    """A shift that could not be billed; reported next to the successes."""

    shift_id: Union[int, str]
    date: Union[date, str]
    error: str
    error_type: str

    @classmethod
    def from_error(cls, shift, exc: Exception) -> "ShiftFailure":
        return cls(
            shift_id=shift.shift_id,
            date=shift.date,
            error=str(exc),
            error_type=type(exc).__name__,
        )

    def to_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "date": self.date.isoformat() if isinstance(self.date, date) else str(self.date),
            "error": self.error,
            "error_type": self.error_type,
        }


@dataclass(frozen=True)
class BatchResult:
    billings: tuple[ShiftBilling, ...]
    failures: tuple[ShiftFailure, ...]

    @property
    def total_amount(self) -> int:
        return sum(b.total_amount for b in self.billings)
