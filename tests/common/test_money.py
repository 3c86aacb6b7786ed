from decimal import Decimal

from src.shift_billing.shift_billing.common.money import format_cents, round_cents


def test_round_cents():
    assert round_cents(8, 2500) == 20000
    assert round_cents(7.5, 2333) == 17498
    assert round_cents(Decimal("0.5"), 3) == 2


def test_format_cents():
    assert format_cents(123450) == "AUD 1,234.50"
    assert format_cents(5, "NZD") == "NZD 0.05"
    assert format_cents(-2500) == "-AUD 25.00"
