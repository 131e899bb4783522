"""SQLAlchemy model for seeded tags."""

from sqlalchemy import Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tagseed.data import MAX_ENTRY_LENGTH
from tagseed.infrastructure.persistence.sqlalchemy.models.base import Base


class TagModel(Base):
    """Database model for a tag seeded from the label list."""

    __tablename__ = "tags"

    __table_args__ = (
        UniqueConstraint("id", name="unique_tag_id"),
        Index("tag_id_index", "id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(MAX_ENTRY_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<TagModel(id={self.id}, title={self.title})>"
