from __future__ import annotations

import logging
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone

logger = logging.getLogger(__name__)


class MySQLKeyValueStore:
    """Key/value store on a MySQL table (see database.bootstrap.KV_SCHEMA)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM kv_store WHERE storage_key=%s", (key,))
                r = fetchone(cur)
                return r["payload"] if r else None
        except mysql.connector.Error as exc:
            logger.error("[storage] mysql read failed for key=%s: %s", key, exc)
            raise StorageError(f"Cannot read {key}") from exc

    def set_item(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store (storage_key, payload)
                    VALUES (%s, %s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as exc:
            logger.error("[storage] mysql write failed for key=%s: %s", key, exc)
            raise StorageError(f"Cannot write {key}") from exc

    def remove_item(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE storage_key=%s", (key,))
        except mysql.connector.Error as exc:
            logger.error("[storage] mysql delete failed for key=%s: %s", key, exc)
            raise StorageError(f"Cannot remove {key}") from exc

    def keys(self) -> Sequence[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT storage_key FROM kv_store ORDER BY storage_key")
                return [r["storage_key"] for r in fetchall(cur)]
        except mysql.connector.Error as exc:
            logger.error("[storage] mysql key listing failed: %s", exc)
            raise StorageError("Cannot list storage keys") from exc
