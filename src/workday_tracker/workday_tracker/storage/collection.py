from __future__ import annotations

import json
import logging
import random
import string
import time
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Generic, Optional, Sequence, TypeVar

from ..core.exceptions import StorageError
from .base import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Millisecond timestamp followed by 9 random base-36 characters."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}{suffix}"


def as_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _encode(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(data: Any) -> str:
    return json.dumps(data, default=_encode, ensure_ascii=False)


def loads(raw: str) -> Any:
    return json.loads(raw, parse_float=Decimal)


class Collection(ABC, Generic[T]):
    """All records of one entity type, stored as a JSON array under one key.

    Reads never fall back to an empty list on failure: a broken backend or an
    undecodable payload raises StorageError.
    """

    def __init__(self, store: KeyValueStore, key: str):
        self._store = store
        self._key = key

    @abstractmethod
    def _id_of(self, item: T) -> str:
        raise NotImplementedError

    @abstractmethod
    def _to_dict(self, item: T) -> dict:
        raise NotImplementedError

    @abstractmethod
    def _from_dict(self, data: dict) -> T:
        raise NotImplementedError

    def _load_rows(self) -> list[dict]:
        raw = self._store.get_item(self._key)
        if raw is None:
            return []
        try:
            rows = loads(raw)
        except ValueError as exc:
            logger.error("[storage] %s payload is not valid JSON: %s", self._key, exc)
            raise StorageError(f"Stored {self._key} data is corrupted") from exc
        if not isinstance(rows, list):
            raise StorageError(f"Stored {self._key} data is not a list")
        return rows

    def _save_rows(self, rows: list[dict]) -> None:
        self._store.set_item(self._key, dumps(rows))

    def _decode(self, row: dict) -> T:
        try:
            return self._from_dict(row)
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            logger.error("[storage] malformed %s row id=%s: %s", self._key, row.get("id") if isinstance(row, dict) else None, exc)
            raise StorageError(f"Malformed {self._key} record") from exc

    def get_all(self) -> Sequence[T]:
        return [self._decode(r) for r in self._load_rows()]

    def get_by_id(self, item_id: str) -> Optional[T]:
        for r in self._load_rows():
            if isinstance(r, dict) and r.get("id") == item_id:
                return self._decode(r)
        return None

    def add(self, item: T) -> None:
        rows = self._load_rows()
        rows.append(self._to_dict(item))
        self._save_rows(rows)
        logger.info("[storage] %s added id=%s", self._key, self._id_of(item))

    def update(self, item: T) -> None:
        """Replace the stored row with the same id; unknown ids are left alone."""
        item_id = self._id_of(item)
        rows = self._load_rows()
        for i, r in enumerate(rows):
            if isinstance(r, dict) and r.get("id") == item_id:
                rows[i] = self._to_dict(item)
                self._save_rows(rows)
                logger.info("[storage] %s updated id=%s", self._key, item_id)
                return
        logger.warning("[storage] %s update skipped, id=%s not found", self._key, item_id)

    def delete(self, item_id: str) -> None:
        rows = self._load_rows()
        kept = [r for r in rows if not (isinstance(r, dict) and r.get("id") == item_id)]
        self._save_rows(kept)
        logger.info("[storage] %s deleted id=%s", self._key, item_id)
