"""Create the MySQL database and the kv_store table used by the mysql backend.

Usage: APP_ENV=production python scripts/init_db.py
"""

from __future__ import annotations

import importlib
import sys

from config import get_settings_module
from workday_tracker.container import build_store
from workday_tracker.core.constants import STORAGE_KEYS
from workday_tracker.database.bootstrap import apply_schema


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    if settings.STORAGE_BACKEND != "mysql":
        print(f"Nothing to do: STORAGE_BACKEND is {settings.STORAGE_BACKEND!r}")
        return 0

    apply_schema(dict(settings.DB_CONFIG))
    store = build_store(backend="mysql", db_config=settings.DB_CONFIG)
    present = set(store.keys())
    for key in STORAGE_KEYS:
        print(f"{key:<14} {'stored' if key in present else 'empty'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
