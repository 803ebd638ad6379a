from dataclasses import replace
from decimal import Decimal

import pytest

from src.workday_tracker.workday_tracker.core.exceptions import NotFoundError
from src.workday_tracker.workday_tracker.payroll.model import EmployeeStats, PeriodStats
from src.workday_tracker.workday_tracker.payroll.service import compute_fleet_totals


def _stats(employee_id: str, work_days: int, earnings: str) -> EmployeeStats:
    period = PeriodStats(work_days=work_days, total_earnings=Decimal(earnings))
    return EmployeeStats(employee_id=employee_id, last_15_days=period, current_month=period)


def test_net_earnings_subtract_advances_per_employee(employee):
    a = replace(employee, advances=Decimal("150"))
    b = replace(employee, employee_id="e2", advances=Decimal("0"))
    stats = [_stats("e1", 3, "600"), _stats("e2", 2, "250.50")]

    totals = compute_fleet_totals([a, b], stats)

    assert totals.total_employees == 2
    assert totals.total_work_days == 5
    assert totals.total_earnings == Decimal("850.50")
    assert totals.total_advances == Decimal("150")
    assert totals.net_earnings == sum((s.current_month.total_earnings for s in stats), Decimal(0)) - Decimal("150")


def test_totals_do_not_depend_on_employee_order(employee):
    a = replace(employee, advances=Decimal("10.10"))
    b = replace(employee, employee_id="e2", advances=Decimal("20.20"))
    stats = [_stats("e1", 1, "100"), _stats("e2", 4, "400")]

    assert compute_fleet_totals([a, b], stats) == compute_fleet_totals([b, a], list(reversed(stats)))


def test_advances_can_make_net_negative(employee):
    a = replace(employee, advances=Decimal("500"))

    totals = compute_fleet_totals([a], [_stats("e1", 1, "200")])

    assert totals.net_earnings == Decimal("-300")


def test_stats_for_unknown_employee_raise(employee):
    with pytest.raises(NotFoundError):
        compute_fleet_totals([employee], [_stats("ghost", 1, "100")])


def test_empty_fleet():
    totals = compute_fleet_totals([], [])

    assert totals.total_employees == 0
    assert totals.net_earnings == 0
