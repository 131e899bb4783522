"""SQLAlchemy repository for generated users."""

from __future__ import annotations

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from tagseed.infrastructure.persistence.sqlalchemy.models import UserModel


class UserRepositorySQLAlchemy:
    """Insert and count rows in ``users``."""

    def __init__(self, session: Session):
        self._session = session

    def add(self, name: str) -> int:
        """Insert a user and return its id."""
        stmt = insert(UserModel).values(name=name).returning(UserModel.id)
        return self._session.execute(stmt).scalar_one()

    def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        return self._session.execute(stmt).scalar_one()
