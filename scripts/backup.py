"""Backup the store.

Note: every storage key is exported into one timestamped JSON file, whatever
the backend (json file, mysql, ...).
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from config import get_settings_module
from workday_tracker.container import build_store

REPO_ROOT = Path(__file__).resolve().parents[1]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        backend=settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"workday_tracker_{ts}.json"

    snapshot = {key: json.loads(store.get_item(key) or "null") for key in store.keys()}
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
