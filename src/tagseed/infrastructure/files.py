"""Filesystem helpers for moving a finished database into build/."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

TMP_DIR_NAME = "tmp"
BUILD_DIR_NAME = "build"


def ensure_directories(working_dir: Path) -> tuple[Path, Path]:
    """Create ``tmp/`` and ``build/`` under ``working_dir`` if missing."""
    tmp_dir = Path(working_dir) / TMP_DIR_NAME
    build_dir = Path(working_dir) / BUILD_DIR_NAME
    tmp_dir.mkdir(parents=True, exist_ok=True)
    build_dir.mkdir(parents=True, exist_ok=True)
    return tmp_dir, build_dir


def create_temporary_file(tmp_dir: Path, filename: str) -> Path:
    """Create an empty temp file for one run, named after ``filename``.

    Each call gets its own file, so runs started in the same second never
    share a temp database.
    """
    name = Path(filename)
    fd, path = tempfile.mkstemp(
        dir=tmp_dir,
        prefix=f"{name.stem}-",
        suffix=name.suffix,
    )
    os.close(fd)
    logger.debug("Created temp database file %s", path)
    return Path(path)


def unique_destination(path: Path) -> Path:
    """Return ``path``, or ``<stem>-N<suffix>`` for the first free N >= 1."""
    path = Path(path)
    if not path.exists():
        return path

    counter = 1
    while True:
        candidate = path.with_name(f"{path.stem}-{counter}{path.suffix}")
        if not candidate.exists():
            logger.debug("%s already exists, using %s", path.name, candidate.name)
            return candidate
        counter += 1


def publish(temporary: Path, destination: Path) -> Path:
    """Copy ``temporary`` to ``destination``, then remove ``temporary``.

    The temporary file is only removed once the copy succeeded.
    """
    logger.debug("Attempting to move generated database file to %s", destination)
    shutil.copy2(temporary, destination)

    logger.debug("Attempting to remove temp database file at %s", temporary)
    Path(temporary).unlink()

    return destination


def discard(path: Path) -> None:
    """Remove a leftover temporary file, if present."""
    path = Path(path)
    if path.exists():
        logger.debug("Removing temp database file at %s", path)
        path.unlink()
