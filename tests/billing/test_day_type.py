from datetime import date

from src.shift_billing.shift_billing.billing.day_type import classify_day
from src.shift_billing.shift_billing.core.enums import DayType


def test_sunday_and_saturday():
    assert classify_day(date(2025, 10, 5), set()) == DayType.SUNDAY
    assert classify_day(date(2025, 10, 4), set()) == DayType.SATURDAY


def test_weekdays():
    for day in range(6, 11):  # Mon 6 Oct .. Fri 10 Oct 2025
        assert classify_day(date(2025, 10, day), set()) == DayType.WEEKDAY


def test_holiday_wins_over_day_of_week():
    holidays = {date(2025, 10, 4), date(2025, 10, 5), date(2025, 10, 6)}

    assert classify_day(date(2025, 10, 4), holidays) == DayType.HOLIDAY
    assert classify_day(date(2025, 10, 5), holidays) == DayType.HOLIDAY
    assert classify_day(date(2025, 10, 6), holidays) == DayType.HOLIDAY
    assert classify_day(date(2025, 10, 7), holidays) == DayType.WEEKDAY
