"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Blog is the aggregate root for comments and likes

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blogapi.models.user import User  # noqa: F401
from blogapi.models.blog import Blog  # noqa: F401
from blogapi.models.comment import Comment  # noqa: F401
from blogapi.models.blog_like import BlogLike  # noqa: F401
