from __future__ import annotations

import math
from typing import Union

from ..core.constants import (
    EMPLOYEE_FIELD_SEPARATOR,
    EMPLOYEE_ID_MAX,
    EMPLOYEE_ID_MIN,
    PIN_MAX,
    PIN_MIN,
    PUNCH_FIELD_SEPARATOR,
)
from ..core.exceptions import ValidationError

Numeric = Union[int, float, str]


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_name(value: str) -> str:
    name = require_non_empty(value, "Name")
    # A trailing '-' would merge into the punch separator that follows the name.
    bad_chars = EMPLOYEE_FIELD_SEPARATOR in name or "\n" in name or "\r" in name
    if bad_chars or PUNCH_FIELD_SEPARATOR in name or name.endswith("-"):
        raise ValidationError(
            f"Name may not contain '{EMPLOYEE_FIELD_SEPARATOR}', '{PUNCH_FIELD_SEPARATOR}', line breaks or a trailing '-'"
        )
    return name


def _to_int(value: Numeric, message: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(message)


def require_employee_id(value: Numeric) -> int:
    """Parse a 7-digit personnel number."""
    employee_id = _to_int(value, "Your ID must be numeric")
    if employee_id < EMPLOYEE_ID_MIN or employee_id > EMPLOYEE_ID_MAX:
        raise ValidationError("ID must be a 7-digit number")
    return employee_id


def require_pin(value: Numeric) -> int:
    pin = _to_int(value, "Your manager pin must be numeric")
    if pin < PIN_MIN or pin > PIN_MAX:
        raise ValidationError("Pin must be a 4-digit number")
    return pin


def require_pay(value: Numeric) -> float:
    if isinstance(value, bool):
        raise ValidationError("Pay must be a positive number")
    try:
        pay = float(str(value).strip()) if isinstance(value, str) else float(value)
    except ValueError:
        raise ValidationError("Pay must be a positive number")
    if not math.isfinite(pay) or pay < 0:
        raise ValidationError("Pay must be a positive number")
    return pay


def require_binary_choice(value: Numeric) -> bool:
    """Parse a 0/1 answer."""
    choice = _to_int(value, "Enter only 0 or 1")
    if choice not in (0, 1):
        raise ValidationError("Enter only 0 or 1")
    return choice == 1
