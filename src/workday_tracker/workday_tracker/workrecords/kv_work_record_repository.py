from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import WORK_RECORDS_KEY
from ..storage.base import KeyValueStore
from ..storage.collection import Collection, as_decimal
from .model import WorkRecord, WorkShift


def shift_from_dict(data: dict) -> WorkShift:
    return WorkShift(
        morning=bool(data.get("morning")),
        evening=bool(data.get("evening")),
        all_day=bool(data.get("allDay")),
    )


def shift_to_dict(shift: WorkShift) -> dict:
    return {"morning": shift.morning, "evening": shift.evening, "allDay": shift.all_day}


class KVWorkRecordRepository(Collection[WorkRecord]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, WORK_RECORDS_KEY)

    def _id_of(self, item: WorkRecord) -> str:
        return item.record_id

    def _to_dict(self, item: WorkRecord) -> dict:
        out: dict = {
            "id": item.record_id,
            "employeeId": item.employee_id,
            "date": item.date,
            "clientIds": list(item.client_ids),
            "isAbsence": item.is_absence,
            "createdAt": item.created_at,
        }
        if item.client_hours is not None:
            out["clientHours"] = dict(item.client_hours)
        if item.client_shifts is not None:
            out["clientShifts"] = {cid: shift_to_dict(s) for cid, s in item.client_shifts.items()}
        if item.daily_advance is not None:
            out["dailyAdvance"] = item.daily_advance
        return out

    def _from_dict(self, data: dict) -> WorkRecord:
        hours = data.get("clientHours")
        shifts = data.get("clientShifts")
        advance = data.get("dailyAdvance")
        return WorkRecord(
            record_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            date=data["date"],
            client_ids=tuple(data.get("clientIds") or ()),
            client_hours={cid: as_decimal(h) for cid, h in hours.items()} if hours is not None else None,
            client_shifts={cid: shift_from_dict(s or {}) for cid, s in shifts.items()} if shifts is not None else None,
            is_absence=bool(data.get("isAbsence")),
            daily_advance=as_decimal(advance) if advance is not None else None,
            created_at=data.get("createdAt") or "",
        )

    def get_by_employee(self, employee_id: str) -> Sequence[WorkRecord]:
        return [r for r in self.get_all() if r.employee_id == employee_id]

    def get_by_date_range(self, employee_id: str, start_date: str, end_date: str) -> Sequence[WorkRecord]:
        return [r for r in self.get_by_employee(employee_id) if start_date <= r.date <= end_date]

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[WorkRecord]:
        for r in self.get_by_employee(employee_id):
            if r.date == work_date:
                return r
        return None
