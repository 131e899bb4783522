"""Shared domain exceptions and error codes.

All generator errors inherit from DomainException so the CLI can report
them uniformly and map them to a non-zero exit code.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_SOURCE_LIST = "EMPTY_SOURCE_LIST"
    INVALID_SOURCE_ENTRY = "INVALID_SOURCE_ENTRY"
    SOURCE_FILE_NOT_FOUND = "SOURCE_FILE_NOT_FOUND"
    INVALID_LIMITS = "INVALID_LIMITS"

    # Generation Errors
    GENERATION_FAILED = "GENERATION_FAILED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all generator errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged, printed by the CLI in debug)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class GenerationError(DomainException):
    """Raised when inserting fixture rows failed and the run was rolled back."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
