"""User ORM — account identity and hashed credentials.

Invariants:
    - email is unique and stored lower-cased
    - password_hash is NULL for accounts created through Google sign-in
    - role is one of Role ("user" | "admin"), default "user"
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blogapi.core.domain_types import Role
from blogapi.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    password_hash: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.USER.value,
    )
    profile_image: Mapped[str | None] = mapped_column(
        String(1024), nullable=True,
    )
    google_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
