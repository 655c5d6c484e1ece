"""Error taxonomy and tagged results shared by services and handlers.

Services return ``Ok(value)`` or ``Err(kind, ...)`` instead of raising for
expected outcomes (not found, forbidden, conflict). Handlers turn an ``Err``
into an ``ApiError``, which the registered exception handlers render as an
HTTP response. Client-facing messages come from the ``Err``; ``reason`` is
an internal discriminator that is logged but never sent to clients.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from fastapi import status

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Internal error kinds; each maps to exactly one HTTP status."""

    VALIDATION_FAILED = "ValidationFailed"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    UNAUTHENTICATED = "Unauthenticated"
    CONFLICT = "Conflict"
    STORAGE = "Storage"
    INTERNAL = "Internal"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

UNAUTHENTICATED_MESSAGE = "Unauthorized"
INTERNAL_ERROR_MESSAGE = "Internal server error"
VALIDATION_FAILED_MESSAGE = "Validation failed"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome: a kind from the taxonomy plus a client-safe message."""

    kind: ErrorKind
    message: str = ""
    reason: Enum | None = None
    details: list[dict[str, Any]] = field(default_factory=list)

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]


Result = Union[Ok[T], Err]


def not_found(resource: str, resource_id: object) -> Err:
    return Err(ErrorKind.NOT_FOUND, f"{resource} not found with id: {resource_id}")


def forbidden(action: str, resource: str) -> Err:
    return Err(ErrorKind.FORBIDDEN, f"You are not authorized to {action} this {resource}")


def unauthenticated(reason: Enum | None = None) -> Err:
    return Err(ErrorKind.UNAUTHENTICATED, UNAUTHENTICATED_MESSAGE, reason=reason)


def validation_failed(details: list[dict[str, Any]]) -> Err:
    return Err(ErrorKind.VALIDATION_FAILED, VALIDATION_FAILED_MESSAGE, details=details)


class ApiError(Exception):
    """Raised at the HTTP boundary to turn an ``Err`` into a response."""

    def __init__(self, err: Err) -> None:
        self.err = err
        super().__init__(err.message or err.kind.value)


def unwrap(result: "Result[T]") -> T:
    """Return the value of an ``Ok`` or raise ``ApiError`` for an ``Err``."""
    if isinstance(result, Err):
        raise ApiError(result)
    return result.value
