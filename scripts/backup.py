"""Backup the data files.

Note: copies employees.txt and punchRecords.txt into ./backups with a
timestamp suffix. Files that do not exist yet are skipped.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from config import get_settings_module

from src.punch_clock.punch_clock.storage.data_files import DataFiles


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    files = DataFiles.in_directory(
        settings.DATA_DIR,
        employees_file=settings.EMPLOYEES_FILE,
        punch_records_file=settings.PUNCH_RECORDS_FILE,
    )

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    copied = 0
    for source in (files.employees, files.punches):
        if not source.exists():
            print(f"Skipped (missing): {source}")
            continue
        target = out_dir / f"{source.stem}_{ts}{source.suffix}"
        try:
            shutil.copy2(source, target)
        except OSError as exc:
            raise SystemExit(f"Cannot copy {source}: {exc}")
        print(f"OK: Backup created: {target}")
        copied += 1

    if not copied:
        raise SystemExit("Nothing to back up yet.")


if __name__ == "__main__":
    main()
