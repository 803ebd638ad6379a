from __future__ import annotations

from typing import Optional, Sequence


class MemoryKeyValueStore:
    """Process-local store (tests and throwaway runs)."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Sequence[str]:
        return sorted(self._data)
