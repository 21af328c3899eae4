from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PunchKind


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: one line of the punch ledger.

    The name is copied at write time and never updated afterwards.
    """

    employee_id: int
    employee_name: str
    kind: PunchKind
    timestamp: str
