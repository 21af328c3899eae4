"""Example: drive the service layer directly (no terminal).

Goal: show that the menu loop is a thin layer; the rules live in the services.
"""

import importlib

from config import get_settings_module

from src.punch_clock.punch_clock.container import build_container
from src.punch_clock.punch_clock.storage.bootstrap import ensure_sample_employees
from src.punch_clock.punch_clock.storage.data_files import DataFiles


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_files=DataFiles.in_directory(settings.DATA_DIR))
    ensure_sample_employees(container.store)

    print(container.time_clock_service.clock_out(2039485).message)
    print(container.time_clock_service.last_punch(2039485).message)
    for row in container.admin_service.roster(4012346):
        print(row)


if __name__ == "__main__":
    main()
