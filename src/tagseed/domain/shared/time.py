"""Time utilities for the domain layer."""

from datetime import datetime


def local_now() -> datetime:
    """Return the current local datetime (timezone-aware)."""
    return datetime.now().astimezone()
