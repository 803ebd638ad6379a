from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkRecord


class WorkRecordRepository(Protocol):
    def get_all(self) -> Sequence[WorkRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[WorkRecord]:
        raise NotImplementedError

    def add(self, record: WorkRecord) -> None:
        raise NotImplementedError

    def update(self, record: WorkRecord) -> None:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError

    def get_by_employee(self, employee_id: str) -> Sequence[WorkRecord]:
        raise NotImplementedError

    def get_by_date_range(self, employee_id: str, start_date: str, end_date: str) -> Sequence[WorkRecord]:
        """Records of one employee with start_date <= date <= end_date (string comparison)."""

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[WorkRecord]:
        raise NotImplementedError
