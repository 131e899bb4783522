"""SQLite engine and session management for a single generation run."""

import logging
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


def sqlite_url(path: Path) -> str:
    """Build the SQLAlchemy URL for a SQLite database file."""
    return f"sqlite:///{Path(path)}"


def create_sqlite_engine(path: Path, echo: bool = False) -> Engine:
    """Create an engine bound to the SQLite file at ``path``.

    The file is created on first connect.
    """
    url = sqlite_url(path)
    logger.debug("Attempting to create connection to %s", url)
    return create_engine(url, echo=echo)


def get_session_maker(engine: Engine) -> sessionmaker[Session]:
    """Get a session maker for ``engine``."""
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,
    )
