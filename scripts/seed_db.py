from __future__ import annotations

import importlib
from pathlib import Path

from config import get_settings_module

from swipe_attendance.database.bootstrap import run_sql_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    seed_path = Path(__file__).resolve().parents[1] / "database" / "seed.sql"
    count = run_sql_file(db_config, path=seed_path)

    print(f"OK: Seeded {db_config.get('database')} ({count} statements)")


if __name__ == "__main__":
    main()
