"""Shared fixtures.

The default store holds (ids used throughout the tests):

- 1111111 Test User     master   pin 1111
- 4012346 Samantha Lee  manager  pin 2864
- 4012347 Morgan Diaz   manager  pin 3141
- 2000001 A             associate
- 2039485 Alex Martinez associate
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.punch_clock.punch_clock.core.enums import Role
from src.punch_clock.punch_clock.core.exceptions import PersistenceError
from src.punch_clock.punch_clock.employees.model import Employee
from src.punch_clock.punch_clock.employees.store import EmployeeStore
from src.punch_clock.punch_clock.punches.model import PunchEvent


class InMemoryEmployees:
    def __init__(self, employees=()):
        self.saved = list(employees)
        self.save_calls = 0
        self.fail_saves = False

    def load_all(self):
        return list(self.saved)

    def save_all(self, employees):
        if self.fail_saves:
            raise PersistenceError("disk full")
        self.save_calls += 1
        self.saved = list(employees)


class InMemoryPunches:
    def __init__(self):
        self.events: list[PunchEvent] = []
        self.fail_appends = False

    def append(self, event: PunchEvent) -> None:
        if self.fail_appends:
            raise PersistenceError("read-only file system")
        self.events.append(event)

    def list_for_employee(self, employee_id: int):
        return [e for e in self.events if e.employee_id == employee_id]

    def last_for_employee(self, employee_id: int) -> Optional[PunchEvent]:
        items = self.list_for_employee(employee_id)
        return items[-1] if items else None


def default_employees() -> list[Employee]:
    return [
        Employee(1111111, "Test User", 20.0, Role.MASTER, 1111),
        Employee(4012346, "Samantha Lee", 16.10, Role.MANAGER, 2864),
        Employee(4012347, "Morgan Diaz", 16.50, Role.MANAGER, 3141),
        Employee(2000001, "A", 15.00),
        Employee(2039485, "Alex Martinez", 15.25),
    ]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(default_employees())


@pytest.fixture
def store(employees_repo) -> EmployeeStore:
    s = EmployeeStore(employees_repo)
    s.reload()
    return s


@pytest.fixture
def punches() -> InMemoryPunches:
    return InMemoryPunches()
