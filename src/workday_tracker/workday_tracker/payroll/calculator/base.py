from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...workrecords.model import WorkRecord


class EarningsCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily pay)."""

    @abstractmethod
    def daily_earnings(self, record: WorkRecord, daily_rate: Decimal) -> Decimal:
        raise NotImplementedError
