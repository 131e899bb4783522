"""SQLAlchemy repository for seeded tags."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from tagseed.infrastructure.persistence.sqlalchemy.models import TagModel


class TagRepositorySQLAlchemy:
    """Insert and query rows in ``tags``."""

    def __init__(self, session: Session):
        self._session = session

    def add(self, title: str) -> int:
        """Insert a tag and return its id."""
        stmt = insert(TagModel).values(title=title).returning(TagModel.id)
        return self._session.execute(stmt).scalar_one()

    def add_all(self, titles: Iterable[str]) -> list[int]:
        """Insert one row per title, in order, returning the assigned ids."""
        return [self.add(title) for title in titles]

    def count(self) -> int:
        stmt = select(func.count()).select_from(TagModel)
        return self._session.execute(stmt).scalar_one()
