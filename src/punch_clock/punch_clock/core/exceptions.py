from __future__ import annotations

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT


class ValidationError(DomainError):
    """Raised when input data is invalid (digit count, non-numeric, negative pay)."""

    kind = ErrorKind.INVALID_INPUT


class NotFoundError(DomainError):
    """Raised when an employee id is unknown."""

    kind = ErrorKind.NOT_FOUND


class AuthorizationError(DomainError):
    """Raised when an employee lacks permission for an action."""

    kind = ErrorKind.PERMISSION_DENIED


class InvalidStateTransitionError(DomainError):
    """Raised when a punch is attempted from the wrong time status."""

    kind = ErrorKind.INVALID_STATE_TRANSITION


class AuthenticationError(DomainError):
    """Raised when a manager pin does not match."""

    kind = ErrorKind.AUTHENTICATION_FAILED


class PersistenceError(Exception):
    """Raised when the data files cannot be read or written.

    Not a DomainError: the caller must treat it as a hard failure.
    """
