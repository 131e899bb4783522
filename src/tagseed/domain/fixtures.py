"""Value objects describing what a generation run inserts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tagseed.data import DEFAULT_LABELS, DEFAULT_NAMES, MAX_ENTRY_LENGTH
from tagseed.domain.shared.exceptions import ErrorCode, ValidationError


def _validate_entries(kind: str, entries: tuple[str, ...]) -> None:
    if not entries:
        msg = f"{kind} list cannot be empty"
        raise ValidationError(msg, code=ErrorCode.EMPTY_SOURCE_LIST)

    for entry in entries:
        if not isinstance(entry, str) or not entry.strip():
            msg = f"{kind} list contains a blank entry"
            raise ValidationError(msg, code=ErrorCode.INVALID_SOURCE_ENTRY)
        if len(entry) > MAX_ENTRY_LENGTH:
            msg = (
                f"{kind} entry exceeds {MAX_ENTRY_LENGTH} characters: "
                f"{entry[:20]}..."
            )
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_SOURCE_ENTRY,
                details={"length": len(entry)},
            )


def read_list_file(path: Path) -> tuple[str, ...]:
    """Read a flat list file: one entry per line.

    Blank lines and lines starting with ``#`` are skipped.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"List file not found: {path}"
        raise ValidationError(
            msg,
            code=ErrorCode.SOURCE_FILE_NOT_FOUND,
            details={"path": str(path)},
        )

    entries = []
    try:
        with path.open(encoding="utf-8") as fh:
            for line in fh:
                entry = line.strip()
                if entry and not entry.startswith("#"):
                    entries.append(entry)
    except UnicodeDecodeError as e:
        msg = f"List file is not valid UTF-8: {path}"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_SOURCE_ENTRY,
            details={"path": str(path), "position": e.start},
        ) from e
    return tuple(entries)


@dataclass(frozen=True)
class FixtureSources:
    """Names to draw users from and labels to seed tags with."""

    names: tuple[str, ...]
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        for kind, value in (("Name", self.names), ("Label", self.labels)):
            if isinstance(value, str):
                msg = f"{kind} list must be a sequence of strings, got a single string"
                raise ValidationError(msg, code=ErrorCode.INVALID_SOURCE_ENTRY)

        # Accept any iterable, store tuples (frozen dataclass workaround)
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "labels", tuple(self.labels))
        _validate_entries("Name", self.names)
        _validate_entries("Label", self.labels)

    @classmethod
    def default(cls) -> FixtureSources:
        return cls(names=DEFAULT_NAMES, labels=DEFAULT_LABELS)

    @classmethod
    def from_files(
        cls,
        names_file: Optional[Path] = None,
        labels_file: Optional[Path] = None,
    ) -> FixtureSources:
        """Load sources from list files, falling back to the built-in lists."""
        names = read_list_file(names_file) if names_file else DEFAULT_NAMES
        labels = read_list_file(labels_file) if labels_file else DEFAULT_LABELS
        return cls(names=names, labels=labels)


@dataclass(frozen=True)
class GenerationLimits:
    """How many users to create and how many tags to attach to each.

    The user loop runs ``desired_user_entries + 1`` times, so a run always
    inserts one more user than requested.
    """

    desired_user_entries: int = 100000
    min_tag_assocs: int = 0
    max_tag_assocs: int = 1

    def __post_init__(self) -> None:
        if self.desired_user_entries < 0:
            msg = f"desired_user_entries must be >= 0, got {self.desired_user_entries}"
            raise ValidationError(msg, code=ErrorCode.INVALID_LIMITS)

        if self.min_tag_assocs < 0:
            msg = f"min_tag_assocs must be >= 0, got {self.min_tag_assocs}"
            raise ValidationError(msg, code=ErrorCode.INVALID_LIMITS)

        if self.min_tag_assocs > self.max_tag_assocs:
            msg = (
                "min_tag_assocs must not exceed max_tag_assocs "
                f"({self.min_tag_assocs} > {self.max_tag_assocs})"
            )
            raise ValidationError(msg, code=ErrorCode.INVALID_LIMITS)

    @property
    def expected_user_count(self) -> int:
        return self.desired_user_entries + 1


@dataclass(frozen=True)
class SeedStats:
    """Statistics about what was seeded."""

    tags_created: int
    users_created: int
    user_tags_created: int
