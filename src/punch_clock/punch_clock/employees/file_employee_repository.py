from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.constants import (
    EMPLOYEE_FIELD_COUNT,
    EMPLOYEE_FIELD_SEPARATOR,
    EMPLOYEE_ID_MAX,
    EMPLOYEE_ID_MIN,
    PIN_MAX,
    PIN_MIN,
    UNSET_PIN,
)
from ..core.enums import Role, TimeStatus
from ..storage.file_base import atomic_writer, read_lines
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def encode_role(role: Role) -> tuple[int, int]:
    """Role -> (isManager, hasMaster) flags of the file format."""
    if role == Role.MASTER:
        return 1, 1
    if role == Role.MANAGER:
        return 1, 0
    return 0, 0


def decode_role(is_manager: bool, has_master: bool) -> Role:
    if has_master:
        return Role.MASTER
    if is_manager:
        return Role.MANAGER
    return Role.ASSOCIATE


def format_employee_line(employee: Employee) -> str:
    is_manager, has_master = encode_role(employee.role)
    fields = [
        employee.name,
        str(employee.employee_id),
        repr(float(employee.pay)),
        str(is_manager),
        str(employee.manager_pin),
        str(has_master),
        str(int(employee.time_status)),
    ]
    return EMPLOYEE_FIELD_SEPARATOR.join(fields)


def parse_employee_line(line: str) -> Optional[Employee]:
    """Decode one record; None when the line is short, malformed or out of range."""
    parts = line.split(EMPLOYEE_FIELD_SEPARATOR)
    if len(parts) < EMPLOYEE_FIELD_COUNT:
        return None

    name, raw_id, raw_pay, raw_mgr, raw_pin, raw_master, raw_status = parts[:EMPLOYEE_FIELD_COUNT]
    try:
        employee_id = int(raw_id)
        pay = float(raw_pay)
        is_manager = bool(int(raw_mgr))
        pin = int(raw_pin)
        has_master = bool(int(raw_master))
        status = TimeStatus(int(raw_status))
    except ValueError:
        return None
    if not EMPLOYEE_ID_MIN <= employee_id <= EMPLOYEE_ID_MAX:
        return None
    if not math.isfinite(pay) or pay < 0:
        return None
    if pin != UNSET_PIN and not PIN_MIN <= pin <= PIN_MAX:
        return None

    role = decode_role(is_manager, has_master)
    if has_master and not is_manager:
        logger.warning("Employee %s has master access without manager flag; loading as master", employee_id)
    if role == Role.ASSOCIATE and pin != UNSET_PIN:
        logger.warning("Associate %s has a manager pin on file; clearing it", employee_id)
        pin = UNSET_PIN
    if role != Role.ASSOCIATE and pin == UNSET_PIN:
        logger.warning("Manager %s has no pin on file; pin must be set by a master", employee_id)

    return Employee(
        employee_id=employee_id,
        name=name,
        pay=pay,
        role=role,
        manager_pin=pin,
        time_status=status,
    )


class FileEmployeeRepository(EmployeeRepository):
    """Employees stored one per line: name|id|pay|isManager|pin|hasMaster|status."""

    def __init__(self, path: Path):
        self._path = Path(path)

    def load_all(self) -> Sequence[Employee]:
        employees: List[Employee] = []
        seen: set[int] = set()
        for lineno, line in enumerate(read_lines(self._path), start=1):
            if not line.strip():
                continue
            employee = parse_employee_line(line)
            if employee is None:
                logger.warning("Skipping malformed or out-of-range employee record at %s:%d", self._path, lineno)
                continue
            if employee.employee_id in seen:
                logger.warning("Skipping duplicate employee id %s at %s:%d", employee.employee_id, self._path, lineno)
                continue
            seen.add(employee.employee_id)
            employees.append(employee)
        return employees

    def save_all(self, employees: Sequence[Employee]) -> None:
        with atomic_writer(self._path) as fh:
            for employee in employees:
                fh.write(format_employee_line(employee) + "\n")
        logger.debug("Saved %d employees to %s", len(employees), self._path)
