"""Authorization Policy — pure allow/deny decisions over (actor, resource, action).

Invariants:
    - No IO: decisions depend only on actor identity, actor role, and resource ownership
    - can_* predicates never raise; ensure_* counterparts raise AuthorizationError
    - Admin role overrides ownership for every owner-restricted action
    - Like, unlike and comment need only an authenticated actor, and blog reads
      need none; both are enforced by the API dependencies, not here
"""

from dataclasses import dataclass

from blogapi.core.domain_types import BlogId, CommentId, Role, UserId
from blogapi.core.errors import AuthorizationError, ErrorContext


@dataclass(frozen=True)
class Actor:
    """The authenticated caller of a request."""
    id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def can_create_blog(actor: Actor) -> bool:
    return actor.is_admin


def can_modify_blog(actor: Actor, blog_author_id: UserId | None) -> bool:
    """Update and delete share one rule: the blog's author or an admin."""
    if actor.is_admin:
        return True
    return blog_author_id is not None and blog_author_id == actor.id


def can_delete_comment(
    actor: Actor,
    comment_author_id: UserId | None,
    blog_author_id: UserId | None,
) -> bool:
    if actor.is_admin:
        return True
    return actor.id in {
        author_id for author_id in (comment_author_id, blog_author_id)
        if author_id is not None
    }


# ─── Enforcing variants ─────────────────────────────────────────

def ensure_can_create_blog(actor: Actor) -> None:
    if not can_create_blog(actor):
        raise AuthorizationError(
            "Only admins can create blogs",
            ErrorContext(user_id=str(actor.id)),
        )


def ensure_can_modify_blog(
    actor: Actor, blog_author_id: UserId | None, action: str, blog_id: BlogId,
) -> None:
    if not can_modify_blog(actor, blog_author_id):
        raise AuthorizationError(
            f"Not authorized to {action} this blog",
            ErrorContext(user_id=str(actor.id), blog_id=str(blog_id)),
        )


def ensure_can_delete_comment(
    actor: Actor,
    comment_author_id: UserId | None,
    blog_author_id: UserId | None,
    comment_id: CommentId,
) -> None:
    if not can_delete_comment(actor, comment_author_id, blog_author_id):
        raise AuthorizationError(
            "Not authorized to delete this comment",
            ErrorContext(user_id=str(actor.id), comment_id=str(comment_id)),
        )
