from __future__ import annotations

import mysql.connector
import pytest

from src.workday_tracker.workday_tracker.core.exceptions import StorageError
from src.workday_tracker.workday_tracker.storage.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table: dict, fail: bool):
        self._table = table
        self._fail = fail
        self._result = []

    def execute(self, sql, params=()):
        if self._fail:
            raise mysql.connector.Error("connection lost")
        sql = " ".join(sql.split())
        if sql.startswith("SELECT payload"):
            key = params[0]
            self._result = [{"payload": self._table[key]}] if key in self._table else []
        elif sql.startswith("INSERT INTO kv_store"):
            self._table[params[0]] = params[1]
        elif sql.startswith("DELETE FROM kv_store"):
            self._table.pop(params[0], None)
        elif sql.startswith("SELECT storage_key"):
            self._result = [{"storage_key": k} for k in sorted(self._table)]

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict, fail: bool):
        self._table = table
        self._fail = fail
        self.committed = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self._table, self._fail)

    def commit(self):
        self.committed += 1

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, fail: bool = False):
        self.table: dict[str, str] = {}
        self.fail = fail

    def connect(self):
        return FakeConnection(self.table, self.fail)


def test_set_get_remove_round_trip():
    factory = FakeConnFactory()
    store = MySQLKeyValueStore(factory)

    store.set_item("employees", "[]")
    store.set_item("clients", "[1]")

    assert store.get_item("employees") == "[]"
    assert store.keys() == ["clients", "employees"]

    store.remove_item("employees")
    assert store.get_item("employees") is None


def test_driver_errors_become_storage_errors():
    store = MySQLKeyValueStore(FakeConnFactory(fail=True))

    with pytest.raises(StorageError):
        store.get_item("employees")
    with pytest.raises(StorageError):
        store.set_item("employees", "[]")
