"""Blog Service — content store operations: posts, views, likes and comments.

Invariants:
    - Every mutation runs the authorization policy (core/authorization.py) before writing
    - get_blog bumps views by exactly 1 per call unless the viewer is the blog's author
    - like/unlike reject redundant calls (AlreadyLikedError / NotLikedError)
    - Comments append at max(position) + 1; deleting one never renumbers the others
    - Blogs are returned with author, comments (with authors) and likes loaded
    - A listing page past the end answers [] without querying rows (offset never
      reaches the database)

Design Decisions:
    - Views use an atomic UPDATE views = views + 1; likes and comments are their own
      rows, so concurrent likes/comments never overwrite each other
    - Blog edits are guarded by the row version (version_id_col); a stale edit
      surfaces as ConcurrencyError
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from blogapi.core.authorization import (
    Actor,
    ensure_can_create_blog,
    ensure_can_delete_comment,
    ensure_can_modify_blog,
)
from blogapi.core.domain_types import (
    BlogId, BlogListFilter, BlogState, CommentId, Role, UserId,
)
from blogapi.core.errors import (
    AlreadyLikedError, ConcurrencyError, ErrorContext, NotFoundError,
    NotLikedError, ValidationError,
)
from blogapi.core.pagination import PageRequest
from blogapi.core.presenters import is_liked_by
from blogapi.models.blog import Blog
from blogapi.models.blog_like import BlogLike
from blogapi.models.comment import Comment
from blogapi.models.user import User
from blogapi.schemas.blog import COMMENT_MAX_LENGTH, BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)


def actor_for(user: User) -> Actor:
    return Actor(id=UserId(user.id), role=Role(user.role))


class BlogService:
    """Blog aggregate operations over a single DB session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────────────

    async def get_blog_or_404(self, blog_id: BlogId) -> Blog:
        blog = await self.db.get(Blog, blog_id)
        if blog is None:
            raise NotFoundError("Blog", ErrorContext(blog_id=str(blog_id)))
        return blog

    async def list_blogs(
        self,
        list_filter: BlogListFilter,
        page: PageRequest,
        author_id: UserId | None = None,
    ) -> tuple[list[Blog], int]:
        """Blogs newest first for one page, plus the total matching count."""
        conditions = _filter_conditions(list_filter, author_id)

        count_query = select(func.count()).select_from(Blog).where(*conditions)
        total = (await self.db.execute(count_query)).scalar_one()
        if page.offset >= total:
            return [], total

        query = (
            select(Blog)
            .where(*conditions)
            .order_by(Blog.created_at.desc(), Blog.id.desc())
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def get_blog(self, blog_id: BlogId, viewer: User | None = None) -> Blog:
        """Fetch a blog, counting the view unless the author is looking at their own post."""
        blog = await self.get_blog_or_404(blog_id)
        if viewer is not None and viewer.id == blog.author_id:
            return blog

        await self.db.execute(
            update(Blog)
            .where(Blog.id == blog.id)
            .values(views=Blog.views + 1)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        await self.db.refresh(blog, attribute_names=["views", "updated_at"])
        return blog

    # ─── Blog writes ────────────────────────────────────────────

    async def create_blog(self, author: User, data: BlogCreate) -> Blog:
        ensure_can_create_blog(actor_for(author))
        blog = Blog(
            title=data.title,
            content=data.content,
            author=author,
            published=True,
            views=0,
            comments=[],
            likes=[],
        )
        self.db.add(blog)
        await self.db.commit()
        logger.info(
            "Blog created",
            extra={"blog_id": str(blog.id), "user_id": str(author.id)},
        )
        return blog

    async def update_blog(
        self, blog_id: BlogId, user: User, data: BlogUpdate,
    ) -> Blog:
        blog = await self.get_blog_or_404(blog_id)
        ensure_can_modify_blog(actor_for(user), blog.author_id, "update", blog.id)

        changes = data.changes()
        for field, value in changes.items():
            setattr(blog, field, value)
        await self._commit_versioned(blog_id)

        if "published" in changes:
            logger.info(
                f"Blog is now {BlogState.from_flag(blog.published).value}",
                extra={"blog_id": str(blog.id), "user_id": str(user.id)},
            )
        return blog

    async def delete_blog(self, blog_id: BlogId, user: User) -> None:
        blog = await self.get_blog_or_404(blog_id)
        ensure_can_modify_blog(actor_for(user), blog.author_id, "delete", blog.id)
        await self.db.delete(blog)
        await self.db.commit()
        logger.info(
            "Blog deleted",
            extra={"blog_id": str(blog_id), "user_id": str(user.id)},
        )

    # ─── Likes ──────────────────────────────────────────────────

    async def like(self, blog_id: BlogId, user: User) -> Blog:
        blog = await self.get_blog_or_404(blog_id)
        context = ErrorContext(user_id=str(user.id), blog_id=str(blog.id))
        if is_liked_by(blog, user.id):
            raise AlreadyLikedError(context)

        blog.likes.append(BlogLike(user_id=user.id))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise AlreadyLikedError(context)
        return blog

    async def unlike(self, blog_id: BlogId, user: User) -> Blog:
        blog = await self.get_blog_or_404(blog_id)
        existing = next((like for like in blog.likes if like.user_id == user.id), None)
        if existing is None:
            raise NotLikedError(
                ErrorContext(user_id=str(user.id), blog_id=str(blog.id)),
            )
        blog.likes.remove(existing)
        await self.db.commit()
        return blog

    # ─── Comments ───────────────────────────────────────────────

    async def add_comment(self, blog_id: BlogId, author: User, text: str) -> Blog:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Please provide comment text", field="text")
        if len(text) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment must be at most {COMMENT_MAX_LENGTH} characters",
                field="text",
            )

        blog = await self.get_blog_or_404(blog_id)
        context = ErrorContext(user_id=str(author.id), blog_id=str(blog_id))
        next_position = max((c.position for c in blog.comments), default=-1) + 1
        blog.comments.append(Comment(
            author=author,
            text=text,
            position=next_position,
            created_at=datetime.now(timezone.utc),
        ))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConcurrencyError(
                "Another comment was added at the same time, please retry",
                context,
            )
        return blog

    async def delete_comment(
        self, blog_id: BlogId, comment_id: CommentId, user: User,
    ) -> Blog:
        blog = await self.get_blog_or_404(blog_id)
        comment = next((c for c in blog.comments if c.id == comment_id), None)
        if comment is None:
            raise NotFoundError(
                "Comment",
                ErrorContext(blog_id=str(blog_id), comment_id=str(comment_id)),
            )
        ensure_can_delete_comment(
            actor_for(user), comment.author_id, blog.author_id, comment.id,
        )
        blog.comments.remove(comment)
        await self.db.commit()
        logger.info(
            "Comment deleted",
            extra={
                "blog_id": str(blog_id), "comment_id": str(comment_id),
                "user_id": str(user.id),
            },
        )
        return blog

    async def _commit_versioned(self, blog_id: BlogId) -> None:
        # rollback expires loaded instances; only plain values may be read after it
        try:
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            raise ConcurrencyError(
                "Blog was modified by another request, please reload and retry",
                ErrorContext(blog_id=str(blog_id)),
            )


def _filter_conditions(
    list_filter: BlogListFilter, author_id: UserId | None,
) -> list:
    if list_filter == BlogListFilter.PUBLISHED:
        return [Blog.published.is_(True)]
    if author_id is None:
        raise ValueError(f"{list_filter.value} listing requires an author id")
    if list_filter == BlogListFilter.BY_AUTHOR:
        return [Blog.author_id == author_id, Blog.published.is_(True)]
    return [Blog.author_id == author_id]
