from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

import pytest

from src.shift_billing.shift_billing.billing.factory import RateProviderFactory
from src.shift_billing.shift_billing.billing.service import BillingService
from src.shift_billing.shift_billing.core.enums import BillingMode, DayType
from src.shift_billing.shift_billing.core.exceptions import ValidationError
from src.shift_billing.shift_billing.rates.model import EmployeeRate, RateTier
from src.shift_billing.shift_billing.shifts.model import Shift


@dataclass
class CountingHolidays:
    dates: set[date] = field(default_factory=set)
    calls: int = 0

    def list_dates(self):
        self.calls += 1
        return set(self.dates)


@dataclass
class InMemoryRateTiers:
    tiers: list[RateTier] = field(default_factory=list)

    def get_tiers(self, *, company_id: int, shift_type: str, day_type: DayType, shift_date: date):
        return sorted(
            (t for t in self.tiers if (t.company_id, t.shift_type, t.day_type) == (company_id, shift_type, day_type)),
            key=lambda t: t.tier_order,
        )


@dataclass
class InMemoryEmployeeRates:
    rates: dict[int, EmployeeRate] = field(default_factory=dict)
    calls: list[int] = field(default_factory=list)

    def get_for_user(self, user_id: int):
        self.calls.append(user_id)
        return self.rates.get(user_id)


def _shift(shift_id, on, start, end, user_id=7):
    return Shift(
        shift_id=shift_id,
        user_id=user_id,
        company_id=1,
        date=on,
        start_time=start,
        end_time=end,
        shift_type="standard",
    )


def _service(holidays=None, tiers=(), rates=None, max_workers=4):
    providers = RateProviderFactory(
        rate_tiers=InMemoryRateTiers(list(tiers)),
        employee_rates=rates or InMemoryEmployeeRates(),
        fallback_rate_cents=2500,
    )
    return BillingService(holidays or CountingHolidays(), providers, max_workers=max_workers)


def test_batch_fetches_holidays_once_and_keeps_order():
    holidays = CountingHolidays({date(2025, 10, 6)})
    shifts = [_shift(i, date(2025, 10, d), "09:00", "17:00") for i, d in enumerate(range(1, 11), start=1)]

    result = _service(holidays).bill_shifts(shifts)

    assert holidays.calls == 1
    assert [b.shift_id for b in result.billings] == list(range(1, 11))
    assert result.failures == ()
    assert next(b for b in result.billings if b.date == date(2025, 10, 6)).day_type == "holiday"


def test_one_bad_shift_does_not_abort_the_batch():
    shifts = [
        _shift(1, date(2025, 10, 6), "09:00", "17:00"),
        _shift(2, date(2025, 10, 7), "25:00", "17:00"),
        _shift(3, date(2025, 10, 8), "10:00", "10:00"),
        _shift(4, date(2025, 10, 9), "09:00", "13:00"),
    ]

    result = _service().bill_shifts(shifts)

    assert [b.shift_id for b in result.billings] == [1, 4]
    assert [f.shift_id for f in result.failures] == [2, 3]
    assert all(f.error_type == "ValidationError" for f in result.failures)
    assert result.total_amount == 20000 + 10000


def test_failures_keep_the_shift_date():
    shifts = [_shift(7, date(2025, 10, 7), "25:00", "17:00")]

    failure = _service().bill_shifts(shifts).failures[0]

    assert failure.date == date(2025, 10, 7)
    assert failure.to_dict()["date"] == "2025-10-07"


def test_empty_batch():
    holidays = CountingHolidays()
    result = _service(holidays).bill_shifts([])

    assert result.billings == ()
    assert result.failures == ()
    assert holidays.calls == 0


def test_employee_mode_loads_each_rate_once():
    rates = InMemoryEmployeeRates(
        {
            7: EmployeeRate(user_id=7, company_id=1, weekday_rate=2000, weeknight_rate=3000),
            8: EmployeeRate(user_id=8, company_id=1, weekday_rate=4000),
        }
    )
    shifts = [
        _shift(1, date(2025, 10, 6), "17:00", "21:00", user_id=7),
        _shift(2, date(2025, 10, 7), "09:00", "11:00", user_id=7),
        _shift(3, date(2025, 10, 7), "09:00", "11:00", user_id=8),
    ]

    result = _service(rates=rates).bill_shifts(shifts, mode=BillingMode.EMPLOYEE_RATE)

    assert sorted(rates.calls) == [7, 8]
    assert [b.total_amount for b in result.billings] == [4000 + 6000, 4000, 8000]
    assert result.billings[0].day_type == "weekday/weeknight"


def test_bill_shift_propagates_validation_errors():
    with pytest.raises(ValidationError):
        _service().bill_shift(_shift(1, date(2025, 10, 6), "9am", "17:00"))


def test_bill_shift_uses_given_holidays():
    holidays = CountingHolidays()
    result = _service(holidays).bill_shift(_shift(1, date(2025, 10, 6), "09:00", "17:00"), holidays={date(2025, 10, 6)})

    assert holidays.calls == 0
    assert result.day_type == "holiday"


def test_employee_mode_shift_without_user_fails_alone():
    rates = InMemoryEmployeeRates({7: EmployeeRate(user_id=7, company_id=1, weekday_rate=2500)})
    shifts = [
        _shift(1, date(2025, 10, 6), "09:00", "17:00"),
        _shift(2, date(2025, 10, 7), "09:00", "17:00", user_id=None),
        _shift(3, date(2025, 10, 8), "09:00", "13:00"),
    ]

    result = _service(rates=rates).bill_shifts(shifts, mode=BillingMode.EMPLOYEE_RATE)

    assert [b.shift_id for b in result.billings] == [1, 3]
    assert [(f.shift_id, f.error_type) for f in result.failures] == [(2, "ValidationError")]
    assert result.total_amount == 20000 + 10000
