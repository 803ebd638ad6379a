from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.workday_tracker.workday_tracker.core.exceptions import NotFoundError, StorageError, ValidationError
from src.workday_tracker.workday_tracker.payroll.service import EarningsReportService
from src.workday_tracker.workday_tracker.workrecords.model import WorkShift


class FakeRecordsRepo:
    def __init__(self, records):
        self._records = list(records)
        self.calls = []

    def get_by_date_range(self, employee_id: str, start_date: str, end_date: str):
        self.calls.append((employee_id, start_date, end_date))
        return [r for r in self._records if r.employee_id == employee_id and start_date <= r.date <= end_date]


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._by_id = {e.employee_id: e for e in employees}

    def get_all(self):
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str):
        return self._by_id.get(employee_id)


class FailingRecordsRepo:
    def get_by_date_range(self, employee_id: str, start_date: str, end_date: str):
        raise StorageError("disk unavailable")


def test_windows_are_inclusive_on_both_ends(employee, make_record, fixed_today):
    records = [
        make_record("2024-06-05", client_ids=("c1",)),  # exactly today - 15 days
        make_record("2024-06-04", client_ids=("c1",)),  # outside last 15 days
        make_record("2024-06-01", client_ids=("c1",)),  # first day of month
        make_record("2024-05-31", client_ids=("c1",)),  # previous month
        make_record("2024-06-20", client_ids=("c1",)),  # reference date
    ]
    svc = EarningsReportService(FakeRecordsRepo(records), FakeEmployeesRepo([employee]))

    stats = svc.compute_employee_stats(employee, reference_date=fixed_today)

    assert stats.employee_id == "e1"
    assert stats.last_15_days.work_days == 2
    assert stats.last_15_days.total_earnings == Decimal("400")
    assert stats.current_month.work_days == 4
    assert stats.current_month.total_earnings == Decimal("800")


def test_absences_are_excluded_from_work_days(employee, make_record, fixed_today):
    records = [
        make_record("2024-06-10", client_ids=("c1",), client_shifts={"c1": WorkShift(morning=True)}),
        make_record("2024-06-11", client_ids=("c1",)),
        make_record("2024-06-12", is_absence=True),
        make_record("2024-06-13", is_absence=True),
    ]
    svc = EarningsReportService(FakeRecordsRepo(records), FakeEmployeesRepo([employee]))

    stats = svc.compute_employee_stats(employee, reference_date=fixed_today)

    assert stats.current_month.work_days == 2
    assert stats.current_month.total_earnings == Decimal("300")


def test_non_absence_record_without_pay_still_counts_as_work_day(employee, make_record, fixed_today):
    records = [make_record("2024-06-10", client_shifts={"c1": WorkShift()})]
    svc = EarningsReportService(FakeRecordsRepo(records), FakeEmployeesRepo([employee]))

    stats = svc.compute_employee_stats(employee, reference_date=fixed_today)

    assert stats.current_month.work_days == 1
    assert stats.current_month.total_earnings == 0


def test_monthly_stats_end_to_end_scenario(employee, make_record):
    records = [
        make_record("2024-06-05", client_ids=("c1",), client_shifts={"c1": WorkShift(all_day=True)}),
        make_record("2024-06-06", is_absence=True),
        make_record("2024-06-07", client_hours={"c1": Decimal("5")}),
        make_record("2024-07-01", client_ids=("c1",)),
    ]
    repo = FakeRecordsRepo(records)
    svc = EarningsReportService(repo, FakeEmployeesRepo([employee]))

    stats = svc.compute_monthly_stats(employee, 2024, 6)

    assert stats.work_days == 2
    assert stats.absence_days == 1
    assert stats.total_records == 3
    assert stats.total_earnings == Decimal("400")
    assert repo.calls[-1] == ("e1", "2024-06-01", "2024-06-30")


def test_monthly_stats_handles_february_of_leap_year(employee, make_record):
    repo = FakeRecordsRepo([make_record("2024-02-29", client_ids=("c1",))])
    svc = EarningsReportService(repo, FakeEmployeesRepo([employee]))

    stats = svc.compute_monthly_stats(employee, 2024, 2)

    assert stats.work_days == 1
    assert repo.calls[-1] == ("e1", "2024-02-01", "2024-02-29")


def test_monthly_stats_rejects_invalid_month(employee):
    svc = EarningsReportService(FakeRecordsRepo([]), FakeEmployeesRepo([employee]))

    with pytest.raises(ValidationError):
        svc.compute_monthly_stats(employee, 2024, 13)


def test_storage_failure_propagates_instead_of_zero_stats(employee, fixed_today):
    svc = EarningsReportService(FailingRecordsRepo(), FakeEmployeesRepo([employee]))

    with pytest.raises(StorageError):
        svc.compute_employee_stats(employee, reference_date=fixed_today)


def test_unknown_employee_id_raises_not_found(employee):
    svc = EarningsReportService(FakeRecordsRepo([]), FakeEmployeesRepo([employee]))

    with pytest.raises(NotFoundError):
        svc.stats_for_employee_id("missing")


def test_invalid_daily_rate_fails_fast(employee, make_record, fixed_today):
    broken = replace(employee, daily_rate=Decimal("-5"))
    svc = EarningsReportService(FakeRecordsRepo([make_record("2024-06-10", client_ids=("c1",))]), FakeEmployeesRepo([broken]))

    with pytest.raises(ValidationError):
        svc.compute_employee_stats(broken, reference_date=fixed_today)


def test_fleet_totals_from_repositories(employee, make_record, fixed_today):
    other = replace(employee, employee_id="e2", name="Salma", daily_rate=Decimal("100"), advances=Decimal("30"))
    first = replace(employee, advances=Decimal("50"))
    records = [
        make_record("2024-06-10", client_ids=("c1",)),
        make_record("2024-06-11", employee_id="e2", client_ids=("c1",), client_shifts={"c1": WorkShift(evening=True)}),
    ]
    svc = EarningsReportService(FakeRecordsRepo(records), FakeEmployeesRepo([first, other]))

    totals = svc.compute_fleet_totals(reference_date=fixed_today)

    assert totals.total_employees == 2
    assert totals.total_work_days == 2
    assert totals.total_earnings == Decimal("250")
    assert totals.total_advances == Decimal("80")
    assert totals.net_earnings == Decimal("170")
