"""Blog ORM — the post aggregate, owning its comments and likes.

Invariants:
    - author_id is set at creation and never reassigned
    - title is trimmed, 1-200 chars; content is non-blank text
    - views only ever grows (atomic UPDATE views = views + 1)
    - version increments on every row UPDATE; a stale write raises StaleDataError
    - deleting a blog deletes its comments and likes (ORM cascade + FK ON DELETE CASCADE)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, DateTime, ForeignKey, Index, Integer, String, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from blogapi.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Blog(Base):
    __tablename__ = "blogs"
    __table_args__ = (
        Index("ix_blogs_author_created", "author_id", "created_at"),
        Index("ix_blogs_published_created", "published", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )

    # Relationships
    author: Mapped["User"] = relationship("User", lazy="selectin")
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="blog",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Comment.position",
    )
    likes: Mapped[list["BlogLike"]] = relationship(
        "BlogLike", back_populates="blog",
        cascade="all, delete-orphan", lazy="selectin",
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<Blog {self.title!r}>"
