from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, TextIO

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def read_lines(path: Path) -> List[str]:
    """Return the file's lines without line endings; a missing file reads as empty.

    Bytes that are not valid UTF-8 are replaced with U+FFFD so a damaged line
    still reaches the record parser.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise PersistenceError(f"Cannot read {path}: {exc}") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("%s is not valid UTF-8 (byte %d); replacing undecodable bytes", path, exc.start)
        text = raw.decode("utf-8", errors="replace")
    return text.splitlines()


@contextmanager
def atomic_writer(path: Path) -> Iterator[TextIO]:
    """Write to a temp file next to ``path`` and replace it on success.

    Prior contents stay intact if anything inside the block fails.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as exc:
        raise PersistenceError(f"Cannot write {path}: {exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            yield fh
        os.replace(tmp_name, path)
    except OSError as exc:
        _discard(tmp_name)
        raise PersistenceError(f"Cannot write {path}: {exc}") from exc
    except BaseException:
        _discard(tmp_name)
        raise


def append_line(path: Path, line: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8", newline="\n") as fh:
            fh.write(line + "\n")
    except OSError as exc:
        raise PersistenceError(f"Cannot append to {path}: {exc}") from exc


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass
