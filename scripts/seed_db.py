from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from school_records.container import build_backend, build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = build_backend(storage=settings.STORAGE_BACKEND, db_config=dict(settings.DB_CONFIG))
    container = build_container(backend=backend)
    container.ensure_seeded()

    print(
        f"OK: Seeded {settings.STORAGE_BACKEND} storage -> "
        f"{len(container.students_repo.list())} students, "
        f"{len(container.schedules_repo.get_full())} schedule days"
    )


if __name__ == "__main__":
    main()
