from __future__ import annotations

from ..core.constants import EMPLOYEES_KEY
from ..storage.base import KeyValueStore
from ..storage.collection import Collection, as_decimal
from .model import Employee


class KVEmployeeRepository(Collection[Employee]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, EMPLOYEES_KEY)

    def _id_of(self, item: Employee) -> str:
        return item.employee_id

    def _to_dict(self, item: Employee) -> dict:
        return {
            "id": item.employee_id,
            "name": item.name,
            "dailyRate": item.daily_rate,
            "advances": item.advances,
            "createdAt": item.created_at,
        }

    def _from_dict(self, data: dict) -> Employee:
        return Employee(
            employee_id=str(data["id"]),
            name=data["name"],
            daily_rate=as_decimal(data["dailyRate"]),
            advances=as_decimal(data.get("advances") or 0),
            created_at=data.get("createdAt") or "",
        )
