from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_iso
from ..common.validators import require_non_empty, require_positive
from ..core.exceptions import NotFoundError
from ..storage.collection import generate_id
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: manage employees and their cumulative advances."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.get_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create(self, *, name: str, daily_rate: Any) -> Employee:
        employee = Employee(
            employee_id=generate_id(),
            name=require_non_empty(name, "Name"),
            daily_rate=require_positive(daily_rate, "Daily rate"),
            created_at=now_iso(),
        )
        self._employees.add(employee)
        logger.info("[employees] created id=%s", employee.employee_id)
        return employee

    def update(self, employee_id: str, *, name: Optional[str] = None, daily_rate: Any = None) -> Employee:
        employee = self.get(employee_id)
        if name is not None:
            employee = replace(employee, name=require_non_empty(name, "Name"))
        if daily_rate is not None:
            employee = replace(employee, daily_rate=require_positive(daily_rate, "Daily rate"))
        self._employees.update(employee)
        return employee

    def delete(self, employee_id: str) -> None:
        """Remove the employee only; their work records are kept as history."""
        self.get(employee_id)
        self._employees.delete(employee_id)
        logger.info("[employees] deleted id=%s (work records kept)", employee_id)

    def add_advance(self, employee_id: str, amount: Any) -> Employee:
        value = require_positive(amount, "Advance amount")
        employee = self.get(employee_id)
        updated = replace(employee, advances=(employee.advances or 0) + value)
        self._employees.update(updated)
        logger.info("[employees] advance of %s added to id=%s (total=%s)", value, employee_id, updated.advances)
        return updated
