from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional, Union


@dataclass(frozen=True)
class WorkShift:
    """Shift descriptor for one client on one day (three independent flags)."""

    morning: bool = False
    evening: bool = False
    all_day: bool = False


@dataclass(frozen=True)
class Shifts:
    """Current shift representation: client_id -> WorkShift."""

    by_client: Mapping[str, WorkShift]


@dataclass(frozen=True)
class LegacyHours:
    """Older representation: client_id -> literal hours."""

    by_client: Mapping[str, Decimal]


@dataclass(frozen=True)
class NoShiftData:
    pass


ShiftData = Union[Shifts, LegacyHours, NoShiftData]


@dataclass(frozen=True)
class WorkRecord:
    """Domain entity: one employee's activity (or absence) for a calendar date.

    `date` stays a YYYY-MM-DD string: range filters compare it lexicographically.
    `client_hours` / `client_shifts` are None when the stored record has no such map.
    """

    record_id: str
    employee_id: str
    date: str
    client_ids: tuple[str, ...] = ()
    client_hours: Optional[Mapping[str, Decimal]] = None
    client_shifts: Optional[Mapping[str, WorkShift]] = None
    is_absence: bool = False
    daily_advance: Optional[Decimal] = None
    created_at: str = field(default="", compare=False)

    @property
    def shift_data(self) -> ShiftData:
        """Shift representation used for pay decisions.

        Non-empty shifts win over legacy hours; empty maps count as absent.
        """
        if self.client_shifts:
            return Shifts(self.client_shifts)
        if self.client_hours:
            return LegacyHours(self.client_hours)
        return NoShiftData()

    @property
    def has_activity(self) -> bool:
        return bool(self.is_absence or self.client_ids or self.client_shifts or self.client_hours)
