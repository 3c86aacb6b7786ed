from datetime import date

import pytest

from src.shift_billing.shift_billing.core.enums import DayType
from src.shift_billing.shift_billing.core.exceptions import TierConfigurationError
from src.shift_billing.shift_billing.rates.model import EmployeeRate, RateTier
from src.shift_billing.shift_billing.rates.validation import covers, tier_capacity, validate_tier_group


def _tier(order, hours, rate=2500, day_type=DayType.WEEKDAY, **kwargs):
    return RateTier(
        company_id=1,
        shift_type="standard",
        day_type=day_type,
        tier_order=order,
        hours_in_tier=hours,
        rate_per_hour=rate,
        **kwargs,
    )


def test_valid_group_is_returned_sorted():
    ordered = validate_tier_group([_tier(3, None), _tier(1, 4), _tier(2, 2)])

    assert [t.tier_order for t in ordered] == [1, 2, 3]


@pytest.mark.parametrize(
    "tiers",
    [
        [_tier(1, None), _tier(2, None)],
        [_tier(1, None), _tier(2, 4)],
        [_tier(1, 4), _tier(1, 2)],
        [_tier(1, 4), _tier(2, None, day_type=DayType.SATURDAY)],
        [_tier(1, 0)],
        [_tier(1, 4, rate=-1)],
    ],
)
def test_inconsistent_groups_are_rejected(tiers):
    with pytest.raises(TierConfigurationError):
        validate_tier_group(tiers)


def test_capacity_and_coverage():
    bounded = [_tier(1, 4), _tier(2, 2.5)]

    assert tier_capacity(bounded) == 6.5
    assert covers(bounded, 6.5)
    assert not covers(bounded, 7)
    assert tier_capacity(bounded + [_tier(3, None)]) is None
    assert covers(bounded + [_tier(3, None)], 100)


def test_tier_validity_window_is_inclusive():
    tier = _tier(1, None, valid_from=date(2025, 1, 1), valid_to=date(2025, 12, 31))

    assert tier.is_valid_on(date(2025, 1, 1))
    assert tier.is_valid_on(date(2025, 12, 31))
    assert not tier.is_valid_on(date(2024, 12, 31))
    assert not tier.is_valid_on(date(2026, 1, 1))


def test_open_ended_window():
    assert _tier(1, None).is_valid_on(date(1999, 1, 1))
    assert _tier(1, None, valid_from=date(2025, 7, 1)).is_valid_on(date(2030, 1, 1))


def test_employee_rate_lookup_by_category():
    rate = EmployeeRate(
        user_id=1,
        company_id=1,
        weekday_rate=1,
        weeknight_rate=2,
        saturday_rate=3,
        sunday_rate=4,
        public_holiday_rate=5,
    )

    assert [rate.rate_for(c) for c in DayType] == [1, 2, 3, 4, 5]
    assert EmployeeRate.zero(9).rate_for(DayType.HOLIDAY) == 0
