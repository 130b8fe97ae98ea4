"""Record Protocols — structural contracts for persisted records read by core.

Invariants:
    - Core NEVER imports ORM models; presenters and policies see these Protocols only
    - Relationships (author, comments, likes) are already loaded when a record reaches core
"""

from datetime import datetime
from typing import Protocol, Sequence
from uuid import UUID


class UserRecord(Protocol):
    id: UUID
    email: str
    name: str
    role: str
    profile_image: str | None


class CommentRecord(Protocol):
    id: UUID
    author_id: UUID
    author: UserRecord | None
    text: str
    created_at: datetime


class LikeRecord(Protocol):
    user_id: UUID


class BlogRecord(Protocol):
    id: UUID
    title: str
    content: str
    author_id: UUID
    author: UserRecord | None
    published: bool
    views: int
    comments: Sequence[CommentRecord]
    likes: Sequence[LikeRecord]
    created_at: datetime
    updated_at: datetime
