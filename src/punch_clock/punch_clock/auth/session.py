from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Session:
    """The employee logged in at the terminal, for one login cycle."""

    employee_id: Optional[int] = None
    edit_unlocked: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.employee_id is not None

    def logout(self) -> None:
        self.employee_id = None
        self.edit_unlocked = False
