"""JSON shapes returned by the HTTP layer (camelCase, as the app stores them)."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..clients.model import Client
from ..employees.model import Employee
from ..payroll.model import EmployeeStats, FleetTotals, MonthlyStats, PeriodStats
from ..settings.model import AppSettings
from ..workrecords.model import WorkRecord


def json_number(value: Optional[Decimal]) -> Any:
    if value is None:
        return None
    return int(value) if value == value.to_integral_value() else float(value)


def employee_to_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "dailyRate": json_number(e.daily_rate),
        "advances": json_number(e.advances),
        "createdAt": e.created_at,
    }


def client_to_json(c: Client) -> dict:
    return {"id": c.client_id, "name": c.name, "location": c.location, "createdAt": c.created_at}


def work_record_to_json(r: WorkRecord) -> dict:
    out = {
        "id": r.record_id,
        "employeeId": r.employee_id,
        "date": r.date,
        "clientIds": list(r.client_ids),
        "isAbsence": r.is_absence,
        "createdAt": r.created_at,
    }
    if r.client_hours is not None:
        out["clientHours"] = {cid: json_number(h) for cid, h in r.client_hours.items()}
    if r.client_shifts is not None:
        out["clientShifts"] = {
            cid: {"morning": s.morning, "evening": s.evening, "allDay": s.all_day} for cid, s in r.client_shifts.items()
        }
    if r.daily_advance is not None:
        out["dailyAdvance"] = json_number(r.daily_advance)
    return out


def period_to_json(p: PeriodStats) -> dict:
    return {"workDays": p.work_days, "totalEarnings": json_number(p.total_earnings)}


def employee_stats_to_json(s: EmployeeStats) -> dict:
    return {
        "employeeId": s.employee_id,
        "last15Days": period_to_json(s.last_15_days),
        "currentMonth": period_to_json(s.current_month),
    }


def monthly_stats_to_json(s: MonthlyStats) -> dict:
    return {
        "workDays": s.work_days,
        "totalEarnings": json_number(s.total_earnings),
        "absenceDays": s.absence_days,
        "totalRecords": s.total_records,
    }


def fleet_totals_to_json(t: FleetTotals) -> dict:
    return {
        "totalEmployees": t.total_employees,
        "totalWorkDays": t.total_work_days,
        "totalEarnings": json_number(t.total_earnings),
        "totalAdvances": json_number(t.total_advances),
        "netEarnings": json_number(t.net_earnings),
    }


def settings_to_json(s: AppSettings) -> dict:
    return {"language": s.language.value, "theme": s.theme.value}
