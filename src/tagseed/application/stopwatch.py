"""Wall-clock and memory measurement for a generation run."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Optional


def peak_memory_mb() -> Optional[float]:
    """Peak resident memory of this process in MB, None where unsupported."""
    if sys.platform == "win32":
        return None

    import resource

    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is bytes on macOS, kilobytes on Linux
    divisor = 1_000_000 if sys.platform == "darwin" else 1_000
    return round(peak / divisor, 1)


@dataclass(frozen=True)
class StopwatchEvent:
    duration_ms: int
    memory_mb: Optional[float]


class Stopwatch:
    """Measures one named section of work."""

    def __init__(self, name: str):
        self.name = name
        self._started_at: Optional[float] = None

    def start(self) -> Stopwatch:
        self._started_at = time.perf_counter()
        return self

    def stop(self) -> StopwatchEvent:
        if self._started_at is None:
            msg = f"Stopwatch '{self.name}' was never started"
            raise RuntimeError(msg)
        elapsed_ms = int((time.perf_counter() - self._started_at) * 1000)
        self._started_at = None
        return StopwatchEvent(duration_ms=elapsed_ms, memory_mb=peak_memory_mb())
