from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PeriodStats:
    """Work days and earnings over one date window (derived, never stored)."""

    work_days: int
    total_earnings: Decimal


@dataclass(frozen=True)
class EmployeeStats:
    employee_id: str
    last_15_days: PeriodStats
    current_month: PeriodStats


@dataclass(frozen=True)
class MonthlyStats:
    work_days: int
    total_earnings: Decimal
    absence_days: int
    total_records: int


@dataclass(frozen=True)
class FleetTotals:
    total_employees: int
    total_work_days: int
    total_earnings: Decimal
    total_advances: Decimal
    net_earnings: Decimal
