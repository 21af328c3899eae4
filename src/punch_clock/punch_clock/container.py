from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.service import AdminService
from .auth.service import AuthService
from .common.datetime_utils import Clock
from .employees.file_employee_repository import FileEmployeeRepository
from .employees.store import EmployeeStore
from .punches.file_punch_repository import FilePunchRepository
from .storage.data_files import DataFiles
from .timeclock.service import TimeClockService


@dataclass(frozen=True)
class Container:
    files: DataFiles

    employees_repo: FileEmployeeRepository
    punches_repo: FilePunchRepository
    store: EmployeeStore

    auth_service: AuthService
    time_clock_service: TimeClockService
    admin_service: AdminService


def build_container(*, data_files: DataFiles, clock: Optional[Clock] = None) -> Container:
    data_files.ensure_directory()

    employees_repo = FileEmployeeRepository(data_files.employees)
    punches_repo = FilePunchRepository(data_files.punches)
    store = EmployeeStore(employees_repo)

    auth_service = AuthService(store)
    time_clock_service = TimeClockService(store, punches_repo, clock=clock)
    admin_service = AdminService(store)

    return Container(
        files=data_files,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        store=store,
        auth_service=auth_service,
        time_clock_service=time_clock_service,
        admin_service=admin_service,
    )
