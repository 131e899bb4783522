"""SQLAlchemy repository implementations."""

from tagseed.infrastructure.persistence.sqlalchemy.repositories.tag_repository import (
    TagRepositorySQLAlchemy,
)
from tagseed.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)
from tagseed.infrastructure.persistence.sqlalchemy.repositories.user_tag_repository import (  # NOQA: E501
    UserTagRepositorySQLAlchemy,
)

__all__ = [
    "TagRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "UserTagRepositorySQLAlchemy",
]
