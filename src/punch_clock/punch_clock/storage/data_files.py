from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.constants import DEFAULT_EMPLOYEES_FILE, DEFAULT_PUNCH_RECORDS_FILE


@dataclass(frozen=True)
class DataFiles:
    """Locations of the two line-oriented data files."""

    employees: Path
    punches: Path

    @classmethod
    def in_directory(
        cls,
        data_dir: str | Path,
        *,
        employees_file: str = DEFAULT_EMPLOYEES_FILE,
        punch_records_file: str = DEFAULT_PUNCH_RECORDS_FILE,
    ) -> "DataFiles":
        base = Path(data_dir)
        return cls(employees=base / employees_file, punches=base / punch_records_file)

    def ensure_directory(self) -> None:
        self.employees.parent.mkdir(parents=True, exist_ok=True)
        self.punches.parent.mkdir(parents=True, exist_ok=True)
