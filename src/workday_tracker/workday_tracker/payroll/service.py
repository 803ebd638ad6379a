from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date, month_bounds, now_local
from ..common.validators import require_month
from ..core.constants import LAST_DAYS_WINDOW
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..workrecords.model import WorkRecord
from ..workrecords.repository import WorkRecordRepository
from .calculator.base import EarningsCalculator
from .calculator.standard_calculator import StandardEarningsCalculator
from .model import EmployeeStats, FleetTotals, MonthlyStats, PeriodStats

logger = logging.getLogger(__name__)


def compute_fleet_totals(employees: Sequence[Employee], stats_list: Sequence[EmployeeStats]) -> FleetTotals:
    """Roll per-employee current-month stats up into report totals.

    Advances come from the cumulative `Employee.advances` field and are
    subtracted per employee before summing.
    """
    by_id = {e.employee_id: e for e in employees}

    total_work_days = 0
    total_earnings = Decimal(0)
    total_advances = Decimal(0)
    net_earnings = Decimal(0)

    for stat in stats_list:
        employee = by_id.get(stat.employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {stat.employee_id} not found")

        advances = employee.advances or Decimal(0)
        total_work_days += stat.current_month.work_days
        total_earnings += stat.current_month.total_earnings
        total_advances += advances
        net_earnings += stat.current_month.total_earnings - advances

    return FleetTotals(
        total_employees=len(employees),
        total_work_days=total_work_days,
        total_earnings=total_earnings,
        total_advances=total_advances,
        net_earnings=net_earnings,
    )


class EarningsReportService:
    """Work days and earnings per employee, always recomputed from stored records."""

    def __init__(
        self,
        records: WorkRecordRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[EarningsCalculator] = None,
        window_days: int = LAST_DAYS_WINDOW,
    ):
        self._records = records
        self._employees = employees
        self._calculator = calculator or StandardEarningsCalculator()
        self._window_days = int(window_days)

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _summarize(self, employee: Employee, records: Sequence[WorkRecord]) -> PeriodStats:
        # Any non-absence record is a work day, even one that earns nothing.
        work_days = sum(1 for r in records if not r.is_absence)
        total = sum((self._calculator.daily_earnings(r, employee.daily_rate) for r in records), Decimal(0))
        return PeriodStats(work_days=work_days, total_earnings=total)

    def compute_daily_earnings(self, record: WorkRecord, daily_rate) -> Decimal:
        return self._calculator.daily_earnings(record, daily_rate)

    def compute_employee_stats(self, employee: Employee, *, reference_date: Optional[date] = None) -> EmployeeStats:
        today = reference_date or now_local().date()
        end = format_iso_date(today)
        window_start = format_iso_date(today - timedelta(days=self._window_days))
        month_start = format_iso_date(today.replace(day=1))

        last_days = self._records.get_by_date_range(employee.employee_id, window_start, end)
        this_month = self._records.get_by_date_range(employee.employee_id, month_start, end)

        return EmployeeStats(
            employee_id=employee.employee_id,
            last_15_days=self._summarize(employee, last_days),
            current_month=self._summarize(employee, this_month),
        )

    def compute_monthly_stats(self, employee: Employee, year: int, month: int) -> MonthlyStats:
        """Stats for one calendar month (month is 1-12)."""
        year, month = require_month(year, month)
        first, last = month_bounds(year, month)
        records = self._records.get_by_date_range(employee.employee_id, format_iso_date(first), format_iso_date(last))

        summary = self._summarize(employee, records)
        return MonthlyStats(
            work_days=summary.work_days,
            total_earnings=summary.total_earnings,
            absence_days=sum(1 for r in records if r.is_absence),
            total_records=len(records),
        )

    def stats_for_employee_id(self, employee_id: str, *, reference_date: Optional[date] = None) -> EmployeeStats:
        return self.compute_employee_stats(self._get_employee(employee_id), reference_date=reference_date)

    def monthly_stats_for_employee_id(self, employee_id: str, year: int, month: int) -> MonthlyStats:
        return self.compute_monthly_stats(self._get_employee(employee_id), year, month)

    def all_employee_stats(self, *, reference_date: Optional[date] = None) -> tuple[list[Employee], list[EmployeeStats]]:
        employees = list(self._employees.get_all())
        stats = [self.compute_employee_stats(e, reference_date=reference_date) for e in employees]
        return employees, stats

    def compute_fleet_totals(self, *, reference_date: Optional[date] = None) -> FleetTotals:
        employees, stats = self.all_employee_stats(reference_date=reference_date)
        totals = compute_fleet_totals(employees, stats)
        logger.info(
            "[payroll] fleet totals employees=%s work_days=%s earnings=%s",
            totals.total_employees,
            totals.total_work_days,
            totals.total_earnings,
        )
        return totals
