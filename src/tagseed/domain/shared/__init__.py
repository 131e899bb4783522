"""Shared domain building blocks."""

from tagseed.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    GenerationError,
    ValidationError,
)
from tagseed.domain.shared.time import local_now

__all__ = [
    "DomainException",
    "ErrorCode",
    "GenerationError",
    "ValidationError",
    "local_now",
]
