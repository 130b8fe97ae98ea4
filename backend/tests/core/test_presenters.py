"""Presenters — verifies API payload shapes built from plain records.

Invariants:
    - Counts are derived from the likes/comments collections
    - isLiked depends on the viewer; anonymous viewers never like
    - commentsList appears only when requested
    - User payloads never include a password hash
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

from blogapi.core.presenters import (
    author_summary, blog_payload, comment_payload, is_liked_by, public_user,
)

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _user(**overrides):
    fields = {
        "id": uuid4(), "email": "ada@example.com", "name": "Ada",
        "role": "user", "profile_image": None, "password_hash": "secret-hash",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _blog(author, likes=(), comments=()):
    return SimpleNamespace(
        id=uuid4(), title="Hello", content="World",
        author_id=author.id, author=author, published=True, views=3,
        likes=list(likes), comments=list(comments),
        created_at=NOW, updated_at=NOW,
    )


def test_public_user_omits_password_hash():
    payload = public_user(_user())
    assert "password_hash" not in payload
    assert "password" not in payload
    assert set(payload) == {"id", "email", "name", "role", "profileImage"}


def test_author_summary_handles_missing_author():
    assert author_summary(None) is None


def test_comment_payload_embeds_author_summary():
    author = _user(name="Commenter", profile_image="https://img/c.png")
    comment = SimpleNamespace(
        id=uuid4(), author_id=author.id, author=author,
        text="Nice!", created_at=NOW,
    )
    payload = comment_payload(comment)
    assert payload["text"] == "Nice!"
    assert payload["user"] == {
        "id": str(author.id), "name": "Commenter",
        "profileImage": "https://img/c.png",
    }
    assert payload["createdAt"] == NOW.isoformat()


def test_blog_payload_counts_likes_and_comments():
    author = _user()
    liker = uuid4()
    comment = SimpleNamespace(
        id=uuid4(), author_id=author.id, author=author, text="x", created_at=NOW,
    )
    blog = _blog(author, likes=[SimpleNamespace(user_id=liker)], comments=[comment])

    payload = blog_payload(blog, viewer_id=liker)

    assert payload["likes"] == 1
    assert payload["comments"] == 1
    assert payload["isLiked"] is True
    assert payload["views"] == 3
    assert "commentsList" not in payload


def test_blog_payload_anonymous_viewer_is_not_liking():
    blog = _blog(_user(), likes=[SimpleNamespace(user_id=uuid4())])
    assert blog_payload(blog)["isLiked"] is False
    assert is_liked_by(blog, None) is False


def test_blog_payload_includes_comments_list_on_request():
    author = _user()
    comment = SimpleNamespace(
        id=uuid4(), author_id=author.id, author=author, text="first", created_at=NOW,
    )
    payload = blog_payload(_blog(author, comments=[comment]), include_comments=True)
    assert [c["text"] for c in payload["commentsList"]] == ["first"]
