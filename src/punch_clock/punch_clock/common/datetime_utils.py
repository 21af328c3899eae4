from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..core.constants import TIMESTAMP_FORMAT

Clock = Callable[[], datetime]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_timestamp(value: datetime) -> str:
    """Fixed-width punch timestamp, e.g. ``01/31/26 08:30:00``."""
    return value.strftime(TIMESTAMP_FORMAT)


def timestamp_now(clock: Optional[Clock] = None) -> str:
    return format_timestamp((clock or now_local)())
