"""Presenters — pure conversion of records into API payloads.

Invariants:
    - Password hashes never appear in any payload
    - likes == len(blog.likes) and comments == len(blog.comments), computed on read
    - isLiked is False for anonymous viewers
    - Keys are camelCase where multi-word (isLiked, commentsList, createdAt, profileImage)
"""

from datetime import datetime
from uuid import UUID

from blogapi.core.record_protocols import BlogRecord, CommentRecord, UserRecord


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def public_user(user: UserRecord) -> dict:
    """User payload for auth responses."""
    return {
        "id": str(user.id),
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "profileImage": user.profile_image,
    }


def author_summary(user: UserRecord | None) -> dict | None:
    """Populated author reference on a blog."""
    if user is None:
        return None
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "profileImage": user.profile_image,
    }


def comment_payload(comment: CommentRecord) -> dict:
    author = comment.author
    return {
        "id": str(comment.id),
        "user": {
            "id": str(author.id),
            "name": author.name,
            "profileImage": author.profile_image,
        } if author else None,
        "text": comment.text,
        "createdAt": _iso(comment.created_at),
    }


def like_count(blog: BlogRecord) -> int:
    return len(blog.likes)


def comment_count(blog: BlogRecord) -> int:
    return len(blog.comments)


def is_liked_by(blog: BlogRecord, user_id: UUID | None) -> bool:
    if user_id is None:
        return False
    return any(like.user_id == user_id for like in blog.likes)


def blog_payload(
    blog: BlogRecord,
    viewer_id: UUID | None = None,
    include_comments: bool = False,
) -> dict:
    """Blog payload with counts and viewer-specific flags computed on read."""
    payload = {
        "id": str(blog.id),
        "title": blog.title,
        "content": blog.content,
        "author": author_summary(blog.author),
        "likes": like_count(blog),
        "comments": comment_count(blog),
        "views": blog.views,
        "published": blog.published,
        "isLiked": is_liked_by(blog, viewer_id),
        "createdAt": _iso(blog.created_at),
        "updatedAt": _iso(blog.updated_at),
    }
    if include_comments:
        payload["commentsList"] = comments_payload(blog)
    return payload


def comments_payload(blog: BlogRecord) -> list[dict]:
    return [comment_payload(c) for c in blog.comments]
