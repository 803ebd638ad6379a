from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_iso() -> str:
    return now_local().isoformat(timespec="milliseconds")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month (month is 1-12)."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def date_range(start: str, end: str) -> list[str]:
    """Every YYYY-MM-DD date from start to end, both inclusive."""
    current = parse_iso_date(start)
    stop = parse_iso_date(end)
    out: list[str] = []
    while current <= stop:
        out.append(format_iso_date(current))
        current += timedelta(days=1)
    return out


def is_weekend(value: str) -> bool:
    return parse_iso_date(value).weekday() >= 5


def work_days_in_month(year: int, month: int) -> int:
    """Count Monday to Friday days of a month."""
    first, last = month_bounds(year, month)
    return sum(1 for d in date_range(format_iso_date(first), format_iso_date(last)) if not is_weekend(d))
