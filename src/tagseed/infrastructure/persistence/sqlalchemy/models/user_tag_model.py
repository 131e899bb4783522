"""SQLAlchemy model for user/tag associations."""

from sqlalchemy import Index, Integer, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from tagseed.infrastructure.persistence.sqlalchemy.models.base import Base


class UserTagModel(Base):
    """
    Database model joining users and tags with a rank (0-9).

    user_id and tag_id carry no FOREIGN KEY clause; the generator only
    ever writes ids it has just inserted.

    Table: user_tags
    """

    __tablename__ = "user_tags"

    __table_args__ = (
        UniqueConstraint("id", name="unique_user_tag_id"),
        Index("user_tag_id_index", "id"),
        Index("ut_uid_index", "user_id"),
        Index("ut_tid_index", "tag_id"),
        Index("ut_rank_index", "rank"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    tag_id: Mapped[int] = mapped_column(Integer, nullable=False)
    rank: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    def __repr__(self) -> str:
        return (
            f"<UserTagModel(id={self.id}, user_id={self.user_id}, "
            f"tag_id={self.tag_id}, rank={self.rank})>"
        )
