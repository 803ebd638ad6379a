from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..core.constants import DEFAULT_CURRENCY


def format_currency(amount: Union[Decimal, int, float], currency: str = DEFAULT_CURRENCY) -> str:
    """Render an amount with two decimals followed by the currency code."""
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{value} {currency}"
