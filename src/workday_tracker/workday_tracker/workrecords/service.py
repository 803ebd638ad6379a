from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence, Union

from ..clients.repository import ClientRepository
from ..common.datetime_utils import format_iso_date, month_bounds, now_iso
from ..common.validators import (
    require_bool,
    require_iso_date,
    require_mapping,
    require_month,
    require_non_negative,
    require_str_list,
    to_decimal,
)
from ..core.enums import DayMarker
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from ..storage.collection import generate_id
from .model import WorkRecord, WorkShift
from .repository import WorkRecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayMark:
    marker: DayMarker
    client_count: int


def _flag(shift: Mapping[str, Any], *keys: str) -> bool:
    for key in keys:
        if shift.get(key) is not None:
            return require_bool(shift[key], f"Shift {key}")
    return False


def _to_shift(value: Union[WorkShift, Mapping[str, Any]]) -> WorkShift:
    if isinstance(value, WorkShift):
        return value
    shift = require_mapping(value, "Client shift")
    return WorkShift(
        morning=_flag(shift, "morning"),
        evening=_flag(shift, "evening"),
        all_day=_flag(shift, "all_day", "allDay"),
    )


class WorkDayService:
    """Use cases: record, revisit and clear one employee's day."""

    def __init__(
        self,
        records: WorkRecordRepository,
        employees: EmployeeService,
        clients: Optional[ClientRepository] = None,
    ):
        self._records = records
        self._employees = employees
        self._clients = clients

    def list_for_employee(self, employee_id: str) -> Sequence[WorkRecord]:
        self._employees.get(employee_id)
        return sorted(self._records.get_by_employee(employee_id), key=lambda r: r.date)

    def get_day(self, employee_id: str, work_date: str) -> Optional[WorkRecord]:
        return self._records.get_for_employee_and_date(employee_id, require_iso_date(work_date))

    def _check_clients(self, client_ids: Sequence[str]) -> None:
        if not self._clients:
            return
        for cid in client_ids:
            if not self._clients.get_by_id(cid):
                raise NotFoundError(f"Client {cid} not found")

    @staticmethod
    def _numeric_hours(client_ids: Sequence[str], client_hours: Mapping[str, Any]) -> dict[str, Decimal]:
        # Hours typed for unselected clients, or not numeric, are dropped.
        out: dict[str, Decimal] = {}
        for cid in client_ids:
            value = client_hours.get(cid)
            if value is None or value == "":
                continue
            try:
                out[cid] = require_non_negative(value, "Hours")
            except ValidationError:
                continue
        return out

    def save_work_day(
        self,
        *,
        employee_id: str,
        work_date: str,
        client_ids: Sequence[str] = (),
        is_absence: bool = False,
        client_hours: Optional[Mapping[str, Any]] = None,
        client_shifts: Optional[Mapping[str, Union[WorkShift, Mapping[str, Any]]]] = None,
        daily_advance: Any = None,
        advance_amount: Any = None,
    ) -> Optional[WorkRecord]:
        """Create, update or delete the record for (employee, date).

        A day that is neither an absence nor assigned to a client is not stored:
        any existing record for it is deleted and None is returned.
        An advance_amount > 0 is then added to the employee's cumulative
        advances as a separate write.
        """
        # Everything is checked before the first write.
        work_date = require_iso_date(work_date)
        is_absence = require_bool(is_absence, "isAbsence")
        selected = list(dict.fromkeys(require_str_list(client_ids or [], "clientIds")))
        if client_hours is not None:
            client_hours = require_mapping(client_hours, "clientHours")
        if client_shifts is not None:
            client_shifts = require_mapping(client_shifts, "clientShifts")
        advance = None
        if daily_advance not in (None, ""):
            advance = require_non_negative(daily_advance, "Daily advance")
        extra_advance = Decimal("0")
        if advance_amount not in (None, ""):
            extra_advance = to_decimal(advance_amount, "Advance amount")

        employee = self._employees.get(employee_id)
        existing = self._records.get_for_employee_and_date(employee.employee_id, work_date)

        saved: Optional[WorkRecord] = None
        if is_absence or selected:
            hours = None
            shifts = None
            if not is_absence:
                self._check_clients(selected)
                if client_hours is not None:
                    hours = self._numeric_hours(selected, client_hours)
                if client_shifts is not None:
                    shifts = {cid: _to_shift(s) for cid, s in client_shifts.items() if cid in selected}

            saved = WorkRecord(
                record_id=existing.record_id if existing else generate_id(),
                employee_id=employee.employee_id,
                date=work_date,
                client_ids=() if is_absence else tuple(selected),
                client_hours=hours,
                client_shifts=shifts,
                is_absence=is_absence,
                daily_advance=advance,
                created_at=existing.created_at if existing else now_iso(),
            )
            if existing:
                self._records.update(saved)
            else:
                self._records.add(saved)
            logger.info("[workrecords] saved employee=%s date=%s absence=%s", employee.employee_id, work_date, saved.is_absence)
        elif existing:
            self._records.delete(existing.record_id)
            logger.info("[workrecords] removed empty day employee=%s date=%s", employee.employee_id, work_date)

        if extra_advance > 0:
            self._employees.add_advance(employee.employee_id, extra_advance)

        return saved

    def clear_day(self, employee_id: str, work_date: str) -> bool:
        work_date = require_iso_date(work_date)
        self._employees.get(employee_id)
        existing = self._records.get_for_employee_and_date(employee_id, work_date)
        if not existing:
            return False
        self._records.delete(existing.record_id)
        logger.info("[workrecords] cleared employee=%s date=%s", employee_id, work_date)
        return True

    def day_markers(self, employee_id: str, year: int, month: int) -> dict[str, DayMark]:
        """Calendar markers for the recorded days of one month."""
        year, month = require_month(year, month)
        self._employees.get(employee_id)
        first, last = month_bounds(year, month)
        records = self._records.get_by_date_range(employee_id, format_iso_date(first), format_iso_date(last))

        marks: dict[str, DayMark] = {}
        for r in records:
            if r.is_absence:
                marks[r.date] = DayMark(DayMarker.ABSENCE, 0)
            elif r.client_ids:
                count = len(r.client_ids)
                marker = DayMarker.MULTI_CLIENT if count > 1 else DayMarker.SINGLE_CLIENT
                marks[r.date] = DayMark(marker, count)
        return marks
