from decimal import Decimal

import pytest

from src.workday_tracker.workday_tracker.common.validators import (
    require_bool,
    require_non_empty,
    require_str_list,
    to_decimal,
)
from src.workday_tracker.workday_tracker.core.exceptions import ValidationError
from src.workday_tracker.workday_tracker.storage.collection import dumps, loads


def test_to_decimal_rejects_amounts_a_json_number_cannot_hold():
    assert to_decimal("123456789.123456", "Rate") == Decimal("123456789.123456")
    with pytest.raises(ValidationError):
        to_decimal("1234567890.1234567", "Rate")


def test_accepted_amounts_survive_a_storage_round_trip():
    amount = to_decimal("123456789.123456", "Rate")

    assert loads(dumps({"rate": amount})) == {"rate": amount}


def test_type_checks():
    assert require_non_empty("  Karim ", "Name") == "Karim"
    with pytest.raises(ValidationError):
        require_non_empty(5, "Name")
    with pytest.raises(ValidationError):
        require_non_empty(None, "Name")

    assert require_bool(False, "isAbsence") is False
    with pytest.raises(ValidationError):
        require_bool("false", "isAbsence")

    assert require_str_list(("c1", "c2"), "clientIds") == ["c1", "c2"]
    with pytest.raises(ValidationError):
        require_str_list("c1", "clientIds")
