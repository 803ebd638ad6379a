from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.workday_tracker.workday_tracker.container import build_container
from src.workday_tracker.workday_tracker.employees.model import Employee
from src.workday_tracker.workday_tracker.storage.memory_store import MemoryKeyValueStore
from src.workday_tracker.workday_tracker.workrecords.model import WorkRecord


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 6, 20)


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def employee() -> Employee:
    return Employee(employee_id="e1", name="Karim", daily_rate=Decimal("200"), created_at="2024-01-01T00:00:00.000")


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(date: str, *, employee_id: str = "e1", **kwargs) -> WorkRecord:
        counter["n"] += 1
        return WorkRecord(record_id=f"r{counter['n']}", employee_id=employee_id, date=date, **kwargs)

    return _make


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.workday_tracker.workday_tracker.main import create_app

    return create_app(container)


@pytest.fixture
def http(app):
    return app.test_client()
