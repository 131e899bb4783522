"""SQLAlchemy model for generated users."""

from sqlalchemy import Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tagseed.data import MAX_ENTRY_LENGTH
from tagseed.infrastructure.persistence.sqlalchemy.models.base import Base


class UserModel(Base):
    """
    Database model for a generated user.

    Table: users
    """

    __tablename__ = "users"

    __table_args__ = (
        UniqueConstraint("id", name="unique_user_id"),
        Index("user_id_index", "id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_ENTRY_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, name={self.name})>"
