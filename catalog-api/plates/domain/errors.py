"""Domain error codes for the plates module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PLATE = "INVALID_PLATE"
    INVALID_PLATE_ID = "INVALID_PLATE_ID"
    INVALID_PAGE = "INVALID_PAGE"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPlateError(DomainError):
    """Raised when plate input is missing or violates a domain rule."""

    def __init__(self, message: str = "Plate data is required") -> None:
        super().__init__(code=ErrorCode.INVALID_PLATE, message=message)


class InvalidPlateIdError(DomainError):
    """Raised when a plate ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PLATE_ID,
            message="Invalid plate ID format",
        )


class InvalidPageError(DomainError):
    """Raised when page number or page size is below 1."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGE,
            message="Page number and page size must be at least 1",
        )


class PlateStoreError(DomainError):
    """Raised by a store when the persistence layer fails."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Plate storage is unavailable",
        )
        self.operation = operation
