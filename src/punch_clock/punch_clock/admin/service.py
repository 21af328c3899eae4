from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..common.validators import require_employee_id, require_name, require_pay, require_pin
from ..core.constants import MASKED_ID
from ..core.enums import Role, RoleChange, TimeStatus
from ..core.exceptions import ValidationError
from ..core.result import OperationResult, returns_result
from ..employees.model import Employee, EmployeeDraft
from ..employees.store import EmployeeStore
from ..permissions import policy

logger = logging.getLogger(__name__)

# Target role per change, and the "already there" message.
_ROLE_CHANGES = {
    RoleChange.PROMOTE_TO_MANAGER: (Role.MANAGER, "Employee is already a manager"),
    RoleChange.DEMOTE_TO_ASSOCIATE: (Role.ASSOCIATE, "This employee is already an associate"),
    RoleChange.GRANT_MASTER: (Role.MASTER, "Employee already has master access"),
    RoleChange.REVOKE_MASTER: (Role.MANAGER, "This employee does not have master access"),
}

_ROLE_CHANGE_DONE = {
    RoleChange.PROMOTE_TO_MANAGER: "Employee promoted to manager",
    RoleChange.DEMOTE_TO_ASSOCIATE: "Employee demoted to associate",
    RoleChange.GRANT_MASTER: "Master access granted",
    RoleChange.REVOKE_MASTER: "Employee no longer has master access",
}


def _require_new_pin(pin: Optional[int]) -> int:
    if pin is None:
        raise ValidationError("A 4-digit manager pin is required")
    return require_pin(pin)


@dataclass(frozen=True)
class RosterRow:
    """Read-model for the edit screen employee list."""

    display_id: str
    name: str
    pay: float
    badge: str


@dataclass(frozen=True)
class ClockedInView:
    on_clock: Sequence[Tuple[str, str]]
    on_meal: Sequence[Tuple[str, str]]


@dataclass(frozen=True)
class PayChange:
    employee: Employee
    old_pay: float
    new_pay: float


class AdminService:
    """Use case: manage employees (manager edit menu)."""

    def __init__(self, store: EmployeeStore):
        self._store = store

    def _actor(self, actor_id: int) -> Employee:
        return self._store.require(actor_id, message="Acting employee not found")

    def _target(self, target_id) -> Employee:
        return self._store.require(require_employee_id(target_id))

    @staticmethod
    def _already_in(employee: Employee, change: RoleChange) -> bool:
        if change == RoleChange.PROMOTE_TO_MANAGER:
            return employee.is_manager
        if change == RoleChange.DEMOTE_TO_ASSOCIATE:
            return not employee.is_manager
        if change == RoleChange.GRANT_MASTER:
            return employee.has_master
        return not employee.has_master

    def roster(self, actor_id: int) -> List[RosterRow]:
        actor = self._actor(actor_id)
        return [
            RosterRow(
                display_id=str(e.employee_id) if policy.can_view_id(actor, e) else MASKED_ID,
                name=e.name,
                pay=e.pay,
                badge=e.badge,
            )
            for e in self._store.list_all()
        ]

    @returns_result
    def clocked_in(self, actor_id: int) -> OperationResult:
        actor = self._actor(actor_id)
        policy.require_can_view_clocked_in(actor)

        employees = self._store.list_all()
        view = ClockedInView(
            on_clock=[(e.name, e.badge) for e in employees if e.time_status == TimeStatus.ON_CLOCK],
            on_meal=[(e.name, e.badge) for e in employees if e.time_status == TimeStatus.ON_MEAL],
        )
        message = "" if view.on_clock else "No employees are clocked in"
        return OperationResult.success(message, view, changed=False)

    @returns_result
    def add_employee(self, actor_id: int, draft: EmployeeDraft) -> OperationResult:
        actor = self._actor(actor_id)
        policy.require_can_add(actor)

        name = require_name(draft.name)
        employee_id = require_employee_id(draft.employee_id)
        if employee_id in self._store:
            raise ValidationError("ID already exists")
        pay = require_pay(draft.pay)

        role = Role(draft.role)
        downgraded = False
        if not actor.has_master and role != Role.ASSOCIATE:
            # Non-master managers can only hire associates; the request is not rejected.
            logger.warning(
                "%s requested role %s for %s without master access; adding as associate",
                actor.employee_id,
                role.value,
                employee_id,
            )
            role = Role.ASSOCIATE
            downgraded = True

        pin = _require_new_pin(draft.manager_pin) if role != Role.ASSOCIATE else None
        employee = Employee(employee_id=employee_id, name=name, pay=pay).with_role(role, pin=pin)

        with self._store.transaction() as store:
            store.add(employee)

        logger.info("%s added %s (%s, %s)", actor.employee_id, employee_id, name, role.value)
        message = "Employee added successfully."
        if downgraded:
            message += " Added as associate (master access is required to add managers)."
        return OperationResult.success(message, employee)

    @returns_result
    def remove_employee(self, actor_id: int, target_id) -> OperationResult:
        actor = self._actor(actor_id)
        target_id = require_employee_id(target_id)
        if target_id == actor.employee_id:
            policy.require_can_remove(actor, actor)
        target = self._store.require(target_id, message="Employee # not found")
        policy.require_can_remove(actor, target)

        with self._store.transaction() as store:
            store.remove(target.employee_id)

        logger.info("%s removed %s (%s)", actor.employee_id, target.employee_id, target.name)
        return OperationResult.success(f"{target.name} has been removed", target)

    @returns_result
    def change_pay(self, actor_id: int, target_id, new_pay) -> OperationResult:
        actor = self._actor(actor_id)
        target_id = require_employee_id(target_id)
        if target_id == actor.employee_id:
            policy.require_can_change_pay(actor, actor)
        target = self._target(target_id)
        policy.require_can_change_pay(actor, target)
        pay = require_pay(new_pay)

        with self._store.transaction() as store:
            store.put(target.with_pay(pay))

        logger.info("%s changed pay of %s: %.2f -> %.2f", actor.employee_id, target.employee_id, target.pay, pay)
        change = PayChange(employee=self._store.require(target.employee_id), old_pay=target.pay, new_pay=pay)
        return OperationResult.success(
            f"Pay updated: {target.name} (${target.pay:.2f} to ${pay:.2f})",
            change,
        )

    @returns_result
    def check_pay_target(self, actor_id: int, target_id) -> OperationResult:
        """Validate the target of a pay change before asking for the new pay."""
        actor = self._actor(actor_id)
        target_id = require_employee_id(target_id)
        if target_id == actor.employee_id:
            policy.require_can_change_pay(actor, actor)
        target = self._target(target_id)
        policy.require_can_change_pay(actor, target)
        return OperationResult.success("", target, changed=False)

    def pin_required(self, actor_id: int, target_id: int, change: RoleChange) -> bool:
        """Whether ``change_role`` will need a new pin for this target."""
        actor = self._store.get(actor_id)
        target = self._store.get(target_id)
        if actor is None or target is None:
            return False
        if not policy.can_change_status(actor, target, change) or self._already_in(target, change):
            return False
        return _ROLE_CHANGES[change][0] != Role.ASSOCIATE and not target.has_pin

    @returns_result
    def check_status_target(self, actor_id: int, target_id) -> OperationResult:
        """Validate the target of a status change before asking which change to make."""
        actor = self._actor(actor_id)
        target_id = require_employee_id(target_id)
        if target_id == actor.employee_id:
            policy.require_can_change_status_of(actor, actor)
        target = self._target(target_id)
        policy.require_can_change_status_of(actor, target)
        return OperationResult.success("", target, changed=False)

    @returns_result
    def change_role(self, actor_id: int, target_id, change: RoleChange, pin: Optional[int] = None) -> OperationResult:
        actor = self._actor(actor_id)
        change = RoleChange(change)
        target_id = require_employee_id(target_id)
        if target_id == actor.employee_id:
            policy.require_can_change_status(actor, actor, change)
        target = self._target(target_id)
        policy.require_can_change_status(actor, target, change)

        new_role, already_message = _ROLE_CHANGES[change]
        if self._already_in(target, change):
            return OperationResult.success(already_message, target, changed=False)

        new_pin = None
        if new_role != Role.ASSOCIATE and not target.has_pin:
            new_pin = _require_new_pin(pin)
        updated = target.with_role(new_role, pin=new_pin)

        with self._store.transaction() as store:
            store.put(updated)

        logger.info(
            "%s changed role of %s: %s -> %s",
            actor.employee_id,
            target.employee_id,
            target.role.value,
            new_role.value,
        )
        return OperationResult.success(_ROLE_CHANGE_DONE[change], updated)
