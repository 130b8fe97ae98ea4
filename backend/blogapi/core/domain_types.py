"""Domain Types — identity types and enums shared across the codebase.

Invariants:
    - UserId, BlogId, CommentId wrap UUIDs; services and the authorization policy
      take these, routes wrap the parsed path UUIDs
    - Role and BlogListFilter encode every valid value (no raw string matching)
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
BlogId = NewType("BlogId", UUID)
CommentId = NewType("CommentId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Account roles — maps to the users.role column."""
    USER = "user"
    ADMIN = "admin"


class BlogListFilter(str, Enum):
    """Which blogs a listing returns."""
    PUBLISHED = "published"
    BY_AUTHOR = "by_author"
    MINE = "mine"


class BlogState(str, Enum):
    """Blog visibility derived from the published flag."""
    DRAFT = "draft"
    PUBLISHED = "published"

    @classmethod
    def from_flag(cls, published: bool) -> "BlogState":
        return cls.PUBLISHED if published else cls.DRAFT
