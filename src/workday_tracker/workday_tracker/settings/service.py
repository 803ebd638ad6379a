from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..core.enums import Language, Theme
from ..core.exceptions import ValidationError
from .model import AppSettings
from .repository import SettingsRepository


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> AppSettings:
        return self._settings.get()

    def update(self, *, language: Optional[str] = None, theme: Optional[str] = None) -> AppSettings:
        current = self._settings.get()
        try:
            if language is not None:
                current = replace(current, language=Language(language))
            if theme is not None:
                current = replace(current, theme=Theme(theme))
        except ValueError:
            raise ValidationError("Unsupported language or theme")
        self._settings.save(current)
        return current
