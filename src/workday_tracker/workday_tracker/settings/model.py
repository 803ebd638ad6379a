from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Language, Theme


@dataclass(frozen=True)
class AppSettings:
    language: Language = Language.EN
    theme: Theme = Theme.SYSTEM
