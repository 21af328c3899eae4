from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.punch_clock.punch_clock.employees.file_employee_repository import FileEmployeeRepository
from src.punch_clock.punch_clock.employees.store import EmployeeStore
from src.punch_clock.punch_clock.storage.bootstrap import ensure_sample_employees
from src.punch_clock.punch_clock.storage.data_files import DataFiles


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    files = DataFiles.in_directory(
        settings.DATA_DIR,
        employees_file=settings.EMPLOYEES_FILE,
        punch_records_file=settings.PUNCH_RECORDS_FILE,
    )
    files.ensure_directory()

    store = EmployeeStore(FileEmployeeRepository(files.employees))
    if ensure_sample_employees(store):
        print(f"OK: Seeded sample employees -> {files.employees}")
    else:
        print(f"Skipped: {files.employees} already has {len(store)} employees")


if __name__ == "__main__":
    main()
