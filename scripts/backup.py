"""Backup every collection to a JSON file.

Note: Reads through the configured backend, so it works for memory and MySQL
storage alike. Grade books are found through the student list.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from school_records.container import build_backend
from school_records.core.constants import (
    ATTENDANCE_KEY,
    FACE_PROFILES_KEY,
    GRADES_KEY_PREFIX,
    SCHEDULE_KEY,
    STUDENTS_KEY,
)
from school_records.storage.store import CollectionStore


def collect(store: CollectionStore) -> dict:
    students = store.load(STUDENTS_KEY, [])
    dump = {
        STUDENTS_KEY: students,
        ATTENDANCE_KEY: store.load(ATTENDANCE_KEY, []),
        SCHEDULE_KEY: store.load(SCHEDULE_KEY, {}),
        FACE_PROFILES_KEY: store.load(FACE_PROFILES_KEY, []),
    }
    for s in students:
        key = f"{GRADES_KEY_PREFIX}{s['id']}"
        if store.exists(key):
            dump[key] = store.load(key, [])
    return dump


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = build_backend(storage=settings.STORAGE_BACKEND, db_config=dict(settings.DB_CONFIG))

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"school_records_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

    out_file.write_text(json.dumps(collect(CollectionStore(backend)), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
