"""Domain layer: value objects and exceptions for fixture generation."""

from tagseed.domain.fixtures import (
    FixtureSources,
    GenerationLimits,
    SeedStats,
    read_list_file,
)

__all__ = [
    "FixtureSources",
    "GenerationLimits",
    "SeedStats",
    "read_list_file",
]
