from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from ..core.constants import ISO_DATE_FORMAT, MAX_SIGNIFICANT_DIGITS
from ..core.exceptions import ValidationError


def require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    return require_str(value, field_name).strip()


def require_bool(value: Any, field_name: str) -> bool:
    """JSON true/false only; "false" or 0 are not accepted as booleans."""
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_str_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{field_name} must be a list of ids")
    return list(value)


def require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} must be an object")
    return value


def to_decimal(value: Any, field_name: str) -> Decimal:
    """Coerce a form/JSON number into Decimal, rejecting NaN and infinities."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    if len(amount.normalize().as_tuple().digits) > MAX_SIGNIFICANT_DIGITS:
        raise ValidationError(f"{field_name} has more than {MAX_SIGNIFICANT_DIGITS} significant digits")
    return amount


def require_non_negative(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount


def require_positive(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount


def require_iso_date(value: str, field_name: str = "date") -> str:
    v = (value or "").strip()
    try:
        datetime.strptime(v, ISO_DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return v


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError("month must be between 1 and 12")
    if not 1 <= int(year) <= 9999:
        raise ValidationError("year is out of range")
    return int(year), int(month)
