"""Blog Routes — listings, single-post reads, CRUD, likes and comments.

Invariants:
    - Listing endpoints answer {success, data: [...], pagination}
    - Read endpoints accept an optional bearer token; isLiked is computed for that viewer
    - Mutations require a bearer token; ownership/role checks live in BlogService
    - limit is clamped to settings.max_page_size; page past the end yields data: []
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import get_current_user, get_optional_user
from blogapi.config import get_settings
from blogapi.core.domain_types import BlogId, BlogListFilter, CommentId, UserId
from blogapi.core.pagination import PageRequest, build_pagination
from blogapi.core.presenters import (
    blog_payload, comment_count, comments_payload, is_liked_by, like_count,
)
from blogapi.infrastructure.database import get_db
from blogapi.models.blog import Blog
from blogapi.models.user import User
from blogapi.schemas.blog import BlogCreate, BlogUpdate, CommentCreate
from blogapi.services.blogs import BlogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/blogs", tags=["blogs"])


def page_request(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> PageRequest:
    settings = get_settings()
    size = min(limit or settings.default_page_size, settings.max_page_size)
    return PageRequest(page=page, limit=size)


def _viewer_id(user: User | None) -> UUID | None:
    return user.id if user else None


def _listing_response(
    blogs: list[Blog], total: int, page: PageRequest,
    viewer: User | None, include_comments: bool = False,
) -> dict:
    return {
        "success": True,
        "data": [
            blog_payload(b, _viewer_id(viewer), include_comments=include_comments)
            for b in blogs
        ],
        "pagination": build_pagination(total, page),
    }


def _comments_response(blog: Blog, message: str) -> dict:
    return {
        "success": True,
        "message": message,
        "data": {
            "id": str(blog.id),
            "comments": comment_count(blog),
            "commentsList": comments_payload(blog),
        },
    }


def _likes_response(blog: Blog, user: User, message: str) -> dict:
    return {
        "success": True,
        "message": message,
        "data": {"likes": like_count(blog), "isLiked": is_liked_by(blog, user.id)},
    }


# ─── Listings ───────────────────────────────────────────────────

@router.get("")
async def list_published_blogs(
    page: PageRequest = Depends(page_request),
    viewer: User | None = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    blogs, total = await BlogService(db).list_blogs(BlogListFilter.PUBLISHED, page)
    return _listing_response(blogs, total, page, viewer, include_comments=True)


@router.get("/author/{author_id}")
async def list_blogs_by_author(
    author_id: UUID,
    page: PageRequest = Depends(page_request),
    viewer: User | None = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    blogs, total = await BlogService(db).list_blogs(
        BlogListFilter.BY_AUTHOR, page, author_id=UserId(author_id),
    )
    return _listing_response(blogs, total, page, viewer)


@router.get("/user/my-blogs")
async def list_my_blogs(
    page: PageRequest = Depends(page_request),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blogs, total = await BlogService(db).list_blogs(
        BlogListFilter.MINE, page, author_id=UserId(user.id),
    )
    return _listing_response(blogs, total, page, user)


# ─── Single blog ────────────────────────────────────────────────

@router.get("/{blog_id}")
async def get_blog(
    blog_id: UUID,
    viewer: User | None = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).get_blog(BlogId(blog_id), viewer)
    return {
        "success": True,
        "data": blog_payload(blog, _viewer_id(viewer), include_comments=True),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog(
    body: BlogCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).create_blog(user, body)
    return {
        "success": True,
        "message": "Blog created successfully",
        "data": blog_payload(blog, user.id),
    }


@router.put("/{blog_id}")
async def update_blog(
    blog_id: UUID,
    body: BlogUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).update_blog(BlogId(blog_id), user, body)
    return {
        "success": True,
        "message": "Blog updated successfully",
        "data": blog_payload(blog, user.id),
    }


@router.delete("/{blog_id}")
async def delete_blog(
    blog_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await BlogService(db).delete_blog(BlogId(blog_id), user)
    return {"success": True, "message": "Blog deleted successfully"}


# ─── Likes ──────────────────────────────────────────────────────

@router.post("/{blog_id}/like")
async def like_blog(
    blog_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).like(BlogId(blog_id), user)
    return _likes_response(blog, user, "Blog liked successfully")


@router.delete("/{blog_id}/like")
async def unlike_blog(
    blog_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).unlike(BlogId(blog_id), user)
    return _likes_response(blog, user, "Blog unliked successfully")


# ─── Comments ───────────────────────────────────────────────────

@router.post("/{blog_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    blog_id: UUID,
    body: CommentCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).add_comment(BlogId(blog_id), user, body.text)
    return _comments_response(blog, "Comment added successfully")


@router.delete("/{blog_id}/comments/{comment_id}")
async def delete_comment(
    blog_id: UUID,
    comment_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    blog = await BlogService(db).delete_comment(
        BlogId(blog_id), CommentId(comment_id), user,
    )
    return _comments_response(blog, "Comment deleted successfully")
