from decimal import Decimal

from src.workday_tracker.workday_tracker.payroll.advances import (
    monthly_advances,
    sync_employee_advances,
    total_advances_from_records,
)


def test_record_advances_sum_and_monthly_filter(make_record):
    records = [
        make_record("2024-05-31", client_ids=("c1",), daily_advance=Decimal("40")),
        make_record("2024-06-01", client_ids=("c1",), daily_advance=Decimal("25.50")),
        make_record("2024-06-15", is_absence=True, daily_advance=Decimal("10")),
        make_record("2024-06-16", client_ids=("c1",)),
    ]

    assert total_advances_from_records(records) == Decimal("75.50")
    assert monthly_advances(records, 2024, 6) == Decimal("35.50")
    assert monthly_advances(records, 2024, 7) == 0
    assert sync_employee_advances(records) == Decimal("75.50")
