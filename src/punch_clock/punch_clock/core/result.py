from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Optional

from .enums import ErrorKind
from .exceptions import DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a core operation: a success value or an error kind plus reason."""

    ok: bool
    message: str = ""
    value: Any = None
    error: Optional[ErrorKind] = None
    changed: bool = True

    @classmethod
    def success(cls, message: str = "", value: Any = None, *, changed: bool = True) -> "OperationResult":
        return cls(ok=True, message=message, value=value, changed=changed)

    @classmethod
    def failure(cls, error: DomainError) -> "OperationResult":
        return cls(ok=False, message=str(error), error=error.kind, changed=False)


def returns_result(operation):
    """Convert DomainError raised by a service method into a failed OperationResult.

    Anything else (PersistenceError included) propagates to the caller.
    """

    @wraps(operation)
    def wrapper(*args, **kwargs) -> OperationResult:
        try:
            return operation(*args, **kwargs)
        except DomainError as exc:
            logger.info("%s rejected (%s): %s", operation.__name__, exc.kind.value, exc)
            return OperationResult.failure(exc)

    return wrapper
