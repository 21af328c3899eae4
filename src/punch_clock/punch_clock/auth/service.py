from __future__ import annotations

import logging

from ..core.constants import EMPLOYEE_ID_MAX, EMPLOYEE_ID_MIN
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..core.result import OperationResult, returns_result
from ..employees.model import Employee
from ..employees.store import EmployeeStore
from ..permissions import policy
from .session import Session

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in by personnel number and unlock the manager edit menu."""

    def __init__(self, store: EmployeeStore):
        self._store = store

    @returns_result
    def login(self, raw_id) -> OperationResult:
        # Pick up whatever the last cycle (or another tool) saved.
        self._store.reload()

        try:
            employee_id = int(str(raw_id).strip())
        except ValueError:
            raise ValidationError("Your ID must be numeric")
        if employee_id < EMPLOYEE_ID_MIN or employee_id > EMPLOYEE_ID_MAX:
            raise ValidationError("Your personnel # must be 7 digits")

        employee = self._store.get(employee_id)
        if employee is None:
            raise NotFoundError("personnel # not found")

        logger.info("Login: %s (%s)", employee.name, employee.employee_id)
        return OperationResult.success(f"Welcome, {employee.name}", Session(employee_id=employee_id), changed=False)

    def current_actor(self, session: Session) -> Employee:
        if not session.is_authenticated:
            raise NotFoundError("No employee is logged in")
        return self._store.require(session.employee_id, message="personnel # not found")

    @returns_result
    def unlock_edit(self, session: Session, pin) -> OperationResult:
        """Pin gate of the edit menu.

        A malformed pin can be retried; a wrong pin logs the session out.
        """
        actor = self.current_actor(session)
        policy.require_can_edit_info(actor)
        try:
            policy.verify_pin(actor, pin)
        except AuthenticationError:
            logger.warning("Wrong manager pin for %s; logging out", actor.employee_id)
            session.logout()
            raise

        session.edit_unlocked = True
        return OperationResult.success("", actor, changed=False)

    @returns_result
    def require_edit_unlocked(self, session: Session) -> OperationResult:
        """The acting manager, provided this session passed the pin gate."""
        actor = self.current_actor(session)
        policy.require_can_edit_info(actor)
        if not session.edit_unlocked:
            raise AuthorizationError("Enter your manager pin to edit employee info")
        return OperationResult.success("", actor, changed=False)
