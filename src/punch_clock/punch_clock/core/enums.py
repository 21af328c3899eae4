from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """Permission tier of an employee. MASTER implies manager."""

    ASSOCIATE = "associate"
    MANAGER = "manager"
    MASTER = "master"


class TimeStatus(IntEnum):
    """Clock state persisted as 0/1/2 in the employee file."""

    OFF_CLOCK = 0
    ON_CLOCK = 1
    ON_MEAL = 2


class PunchKind(str, Enum):
    CLOCK_IN = "CLOCK_IN"
    CLOCK_OUT = "CLOCK_OUT"
    START_MEAL = "START_MEAL"
    END_MEAL = "END_MEAL"


class RoleChange(str, Enum):
    """Status change a manager can request from the edit menu."""

    PROMOTE_TO_MANAGER = "promote"
    DEMOTE_TO_ASSOCIATE = "demote"
    GRANT_MASTER = "grant_master"
    REVOKE_MASTER = "revoke_master"


class ErrorKind(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
