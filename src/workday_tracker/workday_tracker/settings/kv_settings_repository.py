from __future__ import annotations

from ..core.constants import SETTINGS_KEY
from ..core.enums import Language, Theme
from ..core.exceptions import StorageError
from ..storage.base import KeyValueStore
from ..storage.collection import dumps, loads
from .model import AppSettings


class KVSettingsRepository:
    """Settings live as one JSON object; stored values are merged over defaults."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self) -> AppSettings:
        defaults = AppSettings()
        raw = self._store.get_item(SETTINGS_KEY)
        if raw is None:
            return defaults
        try:
            data = loads(raw)
            return AppSettings(
                language=Language(data.get("language", defaults.language.value)),
                theme=Theme(data.get("theme", defaults.theme.value)),
            )
        except (ValueError, AttributeError) as exc:
            raise StorageError("Stored app settings are corrupted") from exc

    def save(self, settings: AppSettings) -> None:
        self._store.set_item(
            SETTINGS_KEY,
            dumps({"language": settings.language.value, "theme": settings.theme.value}),
        )
