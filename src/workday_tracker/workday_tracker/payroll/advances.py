"""Advance totals derived from per-day `daily_advance` values.

These are a second ledger next to `Employee.advances`; nothing here writes
back to the employee.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..workrecords.model import WorkRecord


def total_advances_from_records(records: Iterable[WorkRecord]) -> Decimal:
    return sum((r.daily_advance or Decimal(0) for r in records), Decimal(0))


def monthly_advances(records: Iterable[WorkRecord], year: int, month: int) -> Decimal:
    prefix = f"{int(year):04d}-{int(month):02d}-"
    return total_advances_from_records(r for r in records if r.date.startswith(prefix))


def sync_employee_advances(records: Iterable[WorkRecord]) -> Decimal:
    """Record-derived advance total, for reconciling a drifted employee ledger."""
    return total_advances_from_records(records)
