"""Application layer: orchestration of a generation run."""

from tagseed.application.generator import GenerationResult, Generator
from tagseed.application.stopwatch import Stopwatch, StopwatchEvent

__all__ = [
    "GenerationResult",
    "Generator",
    "Stopwatch",
    "StopwatchEvent",
]
