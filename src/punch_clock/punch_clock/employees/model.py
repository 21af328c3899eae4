from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.constants import UNSET_PIN
from ..core.enums import Role, TimeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Note: plain data object; the store hands out new instances on every change.
    """

    employee_id: int
    name: str
    pay: float
    role: Role = Role.ASSOCIATE
    manager_pin: int = UNSET_PIN
    time_status: TimeStatus = TimeStatus.OFF_CLOCK

    @property
    def is_manager(self) -> bool:
        return self.role in (Role.MANAGER, Role.MASTER)

    @property
    def has_master(self) -> bool:
        return self.role == Role.MASTER

    @property
    def has_pin(self) -> bool:
        return self.manager_pin != UNSET_PIN

    @property
    def badge(self) -> str:
        if self.has_master:
            return "MGR*"
        if self.is_manager:
            return "MGR"
        return ""

    def with_status(self, status: TimeStatus) -> "Employee":
        return replace(self, time_status=TimeStatus(status))

    def with_pay(self, pay: float) -> "Employee":
        return replace(self, pay=pay)

    def with_role(self, role: Role, *, pin: Optional[int] = None) -> "Employee":
        """Change role keeping the associate/no-pin invariant."""
        if role == Role.ASSOCIATE:
            return replace(self, role=role, manager_pin=UNSET_PIN)
        return replace(self, role=role, manager_pin=self.manager_pin if pin is None else pin)


@dataclass(frozen=True)
class EmployeeDraft:
    """Values gathered by the caller for a new employee."""

    name: str
    employee_id: int
    pay: float
    role: Role = Role.ASSOCIATE
    manager_pin: Optional[int] = None
