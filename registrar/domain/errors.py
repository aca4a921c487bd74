"""Domain error codes for the registrar module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE = "DUPLICATE"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    IO_ERROR = "IO_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when input is malformed or out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class DuplicateError(DomainError):
    """Raised when a name or registration uniqueness rule is violated."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.DUPLICATE, message=message)


class CapacityError(DomainError):
    """Raised when an event has no available seats."""

    def __init__(self, event_name: str) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=f"Event '{event_name}' is full",
        )


class NotFoundError(DomainError):
    """Raised when a referenced event, registration or index does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class StorageError(DomainError):
    """Raised when a backing file cannot be opened for the required mode."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.IO_ERROR, message=message)


class PermissionDeniedError(DomainError):
    """Raised when a role is not allowed to run an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERMISSION_DENIED,
            message=f"Not allowed to {operation}",
        )
