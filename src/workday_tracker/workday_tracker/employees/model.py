from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee paid by the day.

    Note: plain data object, no storage access here.
    """

    employee_id: str
    name: str
    daily_rate: Decimal
    created_at: str
    advances: Decimal = Decimal("0")
