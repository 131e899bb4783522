"""SQLAlchemy models for persistence layer."""

from tagseed.infrastructure.persistence.sqlalchemy.models.base import Base
from tagseed.infrastructure.persistence.sqlalchemy.models.tag_model import TagModel
from tagseed.infrastructure.persistence.sqlalchemy.models.user_model import UserModel
from tagseed.infrastructure.persistence.sqlalchemy.models.user_tag_model import (
    UserTagModel,
)

__all__ = [
    "Base",
    "TagModel",
    "UserModel",
    "UserTagModel",
]
