"""SQLAlchemy repository for user/tag associations."""

from __future__ import annotations

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from tagseed.infrastructure.persistence.sqlalchemy.models import UserTagModel


class UserTagRepositorySQLAlchemy:
    """Insert and count rows in ``user_tags``."""

    def __init__(self, session: Session):
        self._session = session

    def add(self, user_id: int, tag_id: int, rank: int = 0) -> int:
        """Associate a user with a tag and return the association id."""
        stmt = (
            insert(UserTagModel)
            .values(user_id=user_id, tag_id=tag_id, rank=rank)
            .returning(UserTagModel.id)
        )
        return self._session.execute(stmt).scalar_one()

    def count(self) -> int:
        stmt = select(func.count()).select_from(UserTagModel)
        return self._session.execute(stmt).scalar_one()
