from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..core.constants import PUNCH_FIELD_COUNT, PUNCH_FIELD_SEPARATOR
from ..core.enums import PunchKind
from ..storage.file_base import append_line, read_lines
from .model import PunchEvent
from .repository import PunchRepository

logger = logging.getLogger(__name__)


def format_punch_line(event: PunchEvent) -> str:
    return PUNCH_FIELD_SEPARATOR.join(
        [str(event.employee_id), event.employee_name, event.kind.value, event.timestamp]
    )


def parse_punch_line(line: str) -> Optional[PunchEvent]:
    # The timestamp is the last field and may contain anything but the separator.
    parts = line.split(PUNCH_FIELD_SEPARATOR, PUNCH_FIELD_COUNT - 1)
    if len(parts) < PUNCH_FIELD_COUNT:
        return None
    raw_id, name, raw_kind, timestamp = parts
    try:
        return PunchEvent(
            employee_id=int(raw_id),
            employee_name=name,
            kind=PunchKind(raw_kind),
            timestamp=timestamp,
        )
    except ValueError:
        return None


class FilePunchRepository(PunchRepository):
    """Punches stored one per line: id--name--KIND--timestamp."""

    def __init__(self, path: Path):
        self._path = Path(path)

    def append(self, event: PunchEvent) -> None:
        append_line(self._path, format_punch_line(event))

    def _scan(self) -> Iterator[PunchEvent]:
        for lineno, line in enumerate(read_lines(self._path), start=1):
            if not line.strip():
                continue
            event = parse_punch_line(line)
            if event is None:
                logger.warning("Skipping malformed punch record at %s:%d", self._path, lineno)
                continue
            yield event

    def list_for_employee(self, employee_id: int) -> Sequence[PunchEvent]:
        return [e for e in self._scan() if e.employee_id == employee_id]

    def last_for_employee(self, employee_id: int) -> Optional[PunchEvent]:
        last: Optional[PunchEvent] = None
        for event in self._scan():
            if event.employee_id == employee_id:
                last = event
        return last
