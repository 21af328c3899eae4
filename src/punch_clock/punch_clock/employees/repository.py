from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee file.

    Note: the store depends on this interface, not on a concrete file format.
    The file is always read and written as a whole.
    """

    def load_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
