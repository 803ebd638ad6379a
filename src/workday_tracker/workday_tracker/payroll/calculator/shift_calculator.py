from __future__ import annotations

from decimal import Decimal

from ...core.constants import FULL_DAY_HOURS, HALF_SHIFT_HOURS
from ...core.enums import PayFraction
from ...workrecords.model import LegacyHours, Shifts, WorkRecord, WorkShift


class ShiftHoursCalculator:
    """Hours and pay fraction for one work record.

    Two shift generations coexist: current records carry per-client shift flags
    (normalized to 4/8 hour blocks), legacy records carry per-client hours that
    are taken literally.
    """

    def hours_for_shift(self, shift: WorkShift) -> Decimal:
        if shift.all_day:
            return Decimal(FULL_DAY_HOURS)
        hours = 0
        if shift.morning:
            hours += HALF_SHIFT_HOURS
        if shift.evening:
            hours += HALF_SHIFT_HOURS
        return Decimal(hours)

    def hours_for_record(self, record: WorkRecord) -> Decimal:
        if record.is_absence:
            return Decimal(0)
        # Presence of the shifts map decides the path, even when it is empty.
        if record.client_shifts is not None:
            return sum((self.hours_for_shift(s) for s in record.client_shifts.values()), Decimal(0))
        if record.client_hours is not None:
            return sum((Decimal(str(h)) for h in record.client_hours.values()), Decimal(0))
        return Decimal(0)

    def pay_fraction(self, record: WorkRecord) -> PayFraction:
        """Share of the daily rate earned, evaluated in strict priority order.

        1. absence earns nothing, whatever else the record carries
        2. shifts: flags are unioned across all clients of the day
        3. legacy hours: always a full day, hour values are informational
        4. clients without shift detail: full day
        5. nothing recorded: nothing earned
        """
        if record.is_absence:
            return PayFraction.NONE

        data = record.shift_data
        if isinstance(data, Shifts):
            shifts = data.by_client.values()
            has_full_day = any(s.all_day for s in shifts)
            has_morning = any(s.morning for s in shifts)
            has_evening = any(s.evening for s in shifts)
            if has_full_day or (has_morning and has_evening):
                return PayFraction.FULL
            if has_morning or has_evening:
                return PayFraction.HALF
            return PayFraction.NONE

        if isinstance(data, LegacyHours):
            return PayFraction.FULL

        if record.client_ids:
            return PayFraction.FULL
        return PayFraction.NONE
