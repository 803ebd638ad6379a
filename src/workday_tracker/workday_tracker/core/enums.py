from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """UI language stored in app settings."""

    EN = "en"
    AR = "ar"
    FR = "fr"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class PayFraction(str, Enum):
    """How much of the daily rate a work day earns."""

    FULL = "FULL"
    HALF = "HALF"
    NONE = "NONE"


class DayMarker(str, Enum):
    """Calendar marker for a recorded day."""

    ABSENCE = "absence"
    SINGLE_CLIENT = "single_client"
    MULTI_CLIENT = "multi_client"
