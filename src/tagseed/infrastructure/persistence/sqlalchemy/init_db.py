"""Database schema utilities."""

import logging

from sqlalchemy import Engine

# Import models to register with Base.metadata
import tagseed.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from tagseed.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    """
    Create the users, tags and user_tags tables with their indexes.

    Every run targets a fresh file, so this never has to migrate anything.
    """
    logger.debug("Creating tables: %s", ", ".join(Base.metadata.tables))

    with engine.begin() as conn:
        Base.metadata.create_all(conn)

    logger.info("Database schema created")
