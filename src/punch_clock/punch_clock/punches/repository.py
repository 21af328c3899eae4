from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PunchEvent


class PunchRepository(Protocol):
    """Append-only punch ledger."""

    def append(self, event: PunchEvent) -> None:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[PunchEvent]:
        """Events for one employee in ledger order."""
        raise NotImplementedError

    def last_for_employee(self, employee_id: int) -> Optional[PunchEvent]:
        raise NotImplementedError
