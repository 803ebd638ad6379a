from decimal import Decimal

from src.workday_tracker.workday_tracker.common.datetime_utils import date_range, is_weekend, work_days_in_month
from src.workday_tracker.workday_tracker.common.formatting import format_currency


def test_work_days_in_month_counts_monday_to_friday():
    assert work_days_in_month(2024, 6) == 20
    assert work_days_in_month(2024, 2) == 21


def test_date_range_is_inclusive():
    assert date_range("2024-02-28", "2024-03-01") == ["2024-02-28", "2024-02-29", "2024-03-01"]
    assert date_range("2024-03-02", "2024-03-01") == []


def test_is_weekend():
    assert is_weekend("2024-06-08") is True
    assert is_weekend("2024-06-10") is False


def test_format_currency():
    assert format_currency(Decimal("100")) == "100.00 MAD"
    assert format_currency(Decimal("12.345"), "EUR") == "12.35 EUR"
