from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ...common.validators import require_non_negative
from ...core.enums import PayFraction
from ...workrecords.model import WorkRecord
from .base import EarningsCalculator
from .shift_calculator import ShiftHoursCalculator


class StandardEarningsCalculator(EarningsCalculator):
    """Standard rule: full day pays the daily rate, a half shift pays half of it."""

    def __init__(self, hours: Optional[ShiftHoursCalculator] = None):
        self._hours = hours or ShiftHoursCalculator()

    def daily_earnings(self, record: WorkRecord, daily_rate: Any) -> Decimal:
        rate = require_non_negative(daily_rate, "Daily rate")

        fraction = self._hours.pay_fraction(record)
        if fraction is PayFraction.FULL:
            return rate
        if fraction is PayFraction.HALF:
            return rate / 2
        return Decimal(0)


_default_calculator = StandardEarningsCalculator()


def compute_daily_earnings(record: WorkRecord, daily_rate: Any) -> Decimal:
    return _default_calculator.daily_earnings(record, daily_rate)
