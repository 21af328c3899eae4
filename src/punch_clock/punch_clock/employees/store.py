from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeStore:
    """In-memory employee records keyed by id, backed by a repository.

    Records are looked up by id on every call; callers never hold positions.
    """

    def __init__(self, repository: EmployeeRepository):
        self._repository = repository
        self._by_id: Dict[int, Employee] = {}

    def reload(self) -> None:
        self._by_id = {e.employee_id: e for e in self._repository.load_all()}
        logger.debug("Loaded %d employees", len(self._by_id))

    def save(self) -> None:
        self._repository.save_all(self.list_all())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, employee_id: int) -> bool:
        return employee_id in self._by_id

    def is_empty(self) -> bool:
        return not self._by_id

    def list_all(self) -> List[Employee]:
        return list(self._by_id.values())

    def get(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def require(self, employee_id: int, *, message: str = "Personnel # not found") -> Employee:
        employee = self._by_id.get(employee_id)
        if employee is None:
            raise NotFoundError(message)
        return employee

    @contextmanager
    def transaction(self) -> Iterator["EmployeeStore"]:
        """Apply changes and persist them, or roll everything back.

        If the block or the save fails, the in-memory records are restored
        and the exception propagates.
        """
        snapshot = dict(self._by_id)
        try:
            yield self
            self.save()
        except BaseException:
            self._by_id = snapshot
            raise

    def add(self, employee: Employee) -> None:
        if employee.employee_id in self._by_id:
            raise ValidationError("ID already exists")
        self._by_id[employee.employee_id] = employee

    def put(self, employee: Employee) -> None:
        """Replace an existing record with a changed copy."""
        self.require(employee.employee_id)
        self._by_id[employee.employee_id] = employee

    def remove(self, employee_id: int) -> Employee:
        employee = self.require(employee_id)
        del self._by_id[employee_id]
        return employee
