from src.shift_billing.shift_billing.billing.tiered import apply_tiers, flat_allocation, unbilled_hours
from src.shift_billing.shift_billing.core.enums import DayType
from src.shift_billing.shift_billing.rates.model import RateTier


def _tier(order, hours, rate, day_type=DayType.WEEKDAY):
    return RateTier(
        company_id=1,
        shift_type="standard",
        day_type=day_type,
        tier_order=order,
        hours_in_tier=hours,
        rate_per_hour=rate,
    )


def test_hours_flow_from_bounded_into_unlimited_tier():
    tiers = [_tier(1, 4, 2500), _tier(2, None, 3000)]

    lines = apply_tiers(10.0, tiers, category=DayType.WEEKDAY)

    assert [(b.tier, b.hours, b.subtotal) for b in lines] == [(1, 4.0, 10000), (2, 6.0, 18000)]
    assert sum(b.subtotal for b in lines) == 28000
    assert sum(b.hours for b in lines) == 10.0


def test_stops_when_hours_are_exhausted():
    tiers = [_tier(1, 8, 2500), _tier(2, 4, 3000), _tier(3, None, 4000)]

    lines = apply_tiers(8.0, tiers, category=DayType.WEEKDAY)

    assert len(lines) == 1
    assert lines[0].hours == 8.0


def test_unlimited_tier_is_terminal():
    tiers = [_tier(1, None, 2500), _tier(2, 4, 9999)]

    lines = apply_tiers(12.0, tiers, category=DayType.SUNDAY)

    assert [(b.tier, b.hours) for b in lines] == [(1, 12.0)]
    assert lines[0].category == DayType.SUNDAY


def test_under_covered_hours_go_unbilled():
    tiers = [_tier(1, 4, 2500), _tier(2, 2, 3000)]

    lines = apply_tiers(10.0, tiers, category=DayType.WEEKDAY)

    assert sum(b.hours for b in lines) == 6.0
    assert sum(b.subtotal for b in lines) == 16000
    assert unbilled_hours(10.0, lines) == 4.0


def test_subtotal_rounds_half_away_from_zero():
    assert flat_allocation(0.25, 2502, category=DayType.WEEKDAY).subtotal == 626
    assert flat_allocation(1 / 3, 2500, category=DayType.WEEKDAY).subtotal == 833
