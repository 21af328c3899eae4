from __future__ import annotations

import pytest

from src.punch_clock.punch_clock.core.enums import Role, RoleChange
from src.punch_clock.punch_clock.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from src.punch_clock.punch_clock.employees.model import Employee
from src.punch_clock.punch_clock.permissions import policy

MASTER = Employee(1111111, "Test User", 20.0, Role.MASTER, 1111)
OTHER_MASTER = Employee(1111112, "Dana Cole", 21.0, Role.MASTER, 1212)
MANAGER = Employee(4012346, "Samantha Lee", 16.10, Role.MANAGER, 2864)
OTHER_MANAGER = Employee(4012347, "Morgan Diaz", 16.50, Role.MANAGER, 3141)
ASSOCIATE = Employee(2000001, "A", 15.00)
OTHER_ASSOCIATE = Employee(2039485, "Alex Martinez", 15.25)

EVERYONE = [MASTER, OTHER_MASTER, MANAGER, OTHER_MANAGER, ASSOCIATE, OTHER_ASSOCIATE]


def test_non_master_sees_other_manager_ids_masked():
    assert not policy.can_view_id(MANAGER, OTHER_MANAGER)
    assert not policy.can_view_id(ASSOCIATE, MASTER)
    assert policy.can_view_id(MANAGER, MANAGER)
    assert policy.can_view_id(MANAGER, ASSOCIATE)
    assert policy.can_view_id(MASTER, OTHER_MANAGER)


@pytest.mark.parametrize("actor", EVERYONE)
def test_nobody_changes_own_pay_or_role(actor):
    assert not policy.can_change_pay(actor, actor)
    for change in RoleChange:
        assert not policy.can_change_status(actor, actor, change)
    with pytest.raises(AuthorizationError, match="your own pay"):
        policy.require_can_change_pay(actor, actor)


@pytest.mark.parametrize("actor", [MANAGER, ASSOCIATE])
@pytest.mark.parametrize("change", list(RoleChange))
def test_non_master_cannot_touch_master(actor, change):
    assert not policy.can_change_pay(actor, MASTER)
    assert not policy.can_change_status(actor, MASTER, change)


def test_manager_may_change_pay_of_associates_and_managers():
    assert policy.can_change_pay(MANAGER, ASSOCIATE)
    assert policy.can_change_pay(MANAGER, OTHER_MANAGER)
    assert policy.can_change_pay(MASTER, OTHER_MASTER)
    assert not policy.can_change_pay(ASSOCIATE, OTHER_ASSOCIATE)


def test_status_changes_by_tier():
    assert policy.can_change_status(MANAGER, ASSOCIATE, RoleChange.PROMOTE_TO_MANAGER)
    assert not policy.can_change_status(MANAGER, OTHER_MANAGER, RoleChange.DEMOTE_TO_ASSOCIATE)
    assert not policy.can_change_status(MANAGER, ASSOCIATE, RoleChange.GRANT_MASTER)
    assert not policy.can_change_status(ASSOCIATE, OTHER_ASSOCIATE, RoleChange.PROMOTE_TO_MANAGER)

    for change in RoleChange:
        assert policy.can_change_status(MASTER, MANAGER, change)
        assert policy.can_change_status(MASTER, OTHER_MASTER, change)


def test_master_only_change_reason():
    with pytest.raises(AuthorizationError, match="demote"):
        policy.require_can_change_status(MANAGER, OTHER_MANAGER, RoleChange.DEMOTE_TO_ASSOCIATE)


def test_remove_rules():
    assert policy.can_remove(MANAGER, ASSOCIATE)
    assert not policy.can_remove(MANAGER, OTHER_MANAGER)
    assert policy.can_remove(MASTER, OTHER_MANAGER)
    assert not policy.can_remove(MASTER, MASTER)
    assert not policy.can_remove(ASSOCIATE, OTHER_ASSOCIATE)

    with pytest.raises(AuthorizationError, match="master access to remove a manager"):
        policy.require_can_remove(MANAGER, OTHER_MANAGER)


def test_manager_only_views():
    assert policy.can_add(MANAGER)
    assert not policy.can_add(ASSOCIATE)
    assert policy.can_view_clocked_in(MANAGER)
    assert not policy.can_view_clocked_in(ASSOCIATE)
    assert policy.can_edit_info(MASTER)
    assert not policy.can_edit_info(ASSOCIATE)


def test_verify_pin():
    policy.verify_pin(MANAGER, "2864")

    with pytest.raises(AuthenticationError):
        policy.verify_pin(MANAGER, 1111)
    with pytest.raises(ValidationError):
        policy.verify_pin(MANAGER, "28")
    with pytest.raises(ValidationError):
        policy.verify_pin(MANAGER, "abcd")


def test_unset_pin_never_matches():
    broken = Employee(4999999, "No Pin", 16.0, Role.MANAGER)

    with pytest.raises(AuthenticationError):
        policy.verify_pin(broken, 1000)
