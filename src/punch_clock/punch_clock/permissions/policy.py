"""Permission rules for the three employee tiers.

Every rule is written once as a ``_denial_*`` helper returning the reason an
action is refused (or None). ``can_*`` predicates and ``require_*`` guards are
both derived from it.
"""

from __future__ import annotations

from typing import Optional

from ..common.validators import require_pin
from ..core.enums import RoleChange
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..employees.model import Employee

_MASTER_ONLY_CHANGES = {
    RoleChange.DEMOTE_TO_ASSOCIATE: "You do not have permission to demote employees",
    RoleChange.GRANT_MASTER: "You do not have permission to grant master access",
    RoleChange.REVOKE_MASTER: "You do not have permission to remove master access",
}


def _denial_manager(actor: Employee) -> Optional[str]:
    if not actor.is_manager:
        return "You must be a manager to do this"
    return None


def _denial_remove(actor: Employee, target: Employee) -> Optional[str]:
    if target.employee_id == actor.employee_id:
        return "You may not remove yourself as an employee"
    denial = _denial_manager(actor)
    if denial:
        return denial
    if target.is_manager and not actor.has_master:
        return "You must have master access to remove a manager"
    return None


def _denial_pay(actor: Employee, target: Employee) -> Optional[str]:
    if target.employee_id == actor.employee_id:
        return "You cannot change your own pay"
    denial = _denial_manager(actor)
    if denial:
        return denial
    if target.has_master and not actor.has_master:
        return "You do not have permission to change this employee's pay"
    return None


def _denial_status_target(actor: Employee, target: Employee) -> Optional[str]:
    if target.employee_id == actor.employee_id:
        return "You cannot change your own status"
    denial = _denial_manager(actor)
    if denial:
        return denial
    if target.has_master and not actor.has_master:
        return "You do not have permission to change this employee's status"
    return None


def _denial_status(actor: Employee, target: Employee, change: RoleChange) -> Optional[str]:
    denial = _denial_status_target(actor, target)
    if denial:
        return denial
    if change in _MASTER_ONLY_CHANGES and not actor.has_master:
        return _MASTER_ONLY_CHANGES[change]
    return None


def can_view_id(actor: Employee, target: Employee) -> bool:
    """Non-master viewers see other managers' ids masked."""
    return actor.has_master or not target.is_manager or target.employee_id == actor.employee_id


def can_add(actor: Employee) -> bool:
    return _denial_manager(actor) is None


def can_remove(actor: Employee, target: Employee) -> bool:
    return _denial_remove(actor, target) is None


def can_change_pay(actor: Employee, target: Employee) -> bool:
    return _denial_pay(actor, target) is None


def can_change_status_of(actor: Employee, target: Employee) -> bool:
    """Whether ``actor`` may open a status change on ``target`` at all."""
    return _denial_status_target(actor, target) is None


def can_change_status(actor: Employee, target: Employee, change: RoleChange) -> bool:
    return _denial_status(actor, target, change) is None


def can_view_clocked_in(actor: Employee) -> bool:
    return actor.is_manager


def can_edit_info(actor: Employee) -> bool:
    """Role half of the edit gate; the pin is checked by ``verify_pin``."""
    return actor.is_manager


def _raise_if(denial: Optional[str]) -> None:
    if denial:
        raise AuthorizationError(denial)


def require_can_add(actor: Employee) -> None:
    _raise_if(_denial_manager(actor))


def require_can_remove(actor: Employee, target: Employee) -> None:
    _raise_if(_denial_remove(actor, target))


def require_can_change_pay(actor: Employee, target: Employee) -> None:
    _raise_if(_denial_pay(actor, target))


def require_can_change_status_of(actor: Employee, target: Employee) -> None:
    _raise_if(_denial_status_target(actor, target))


def require_can_change_status(actor: Employee, target: Employee, change: RoleChange) -> None:
    _raise_if(_denial_status(actor, target, change))


def require_can_view_clocked_in(actor: Employee) -> None:
    _raise_if(None if can_view_clocked_in(actor) else "You must be a manager to view clocked in employees")


def require_can_edit_info(actor: Employee) -> None:
    _raise_if(None if can_edit_info(actor) else "You must be a manager to edit employee info")


def verify_pin(actor: Employee, pin) -> None:
    """Check a supplied manager pin.

    Raises ValidationError for a malformed pin (the caller may ask again) and
    AuthenticationError on a mismatch. An unset pin never matches.
    """
    value = require_pin(pin)
    if not actor.has_pin or actor.manager_pin != value:
        raise AuthenticationError("Incorrect, logging you out")
