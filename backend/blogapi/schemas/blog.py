"""Blog Schemas — request bodies for blog and comment endpoints.

Invariants:
    - BlogCreate.title: trimmed, 1-200 chars; BlogCreate.content: non-blank
    - BlogUpdate: every field optional; only fields present in the body are applied
    - CommentCreate.text: trimmed, 1-500 chars; the length bound applies after trimming
"""

from pydantic import BaseModel, field_validator

TITLE_MAX_LENGTH = 200
COMMENT_MAX_LENGTH = 500


def _clean_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    if len(v) > TITLE_MAX_LENGTH:
        raise ValueError(f"title must be at most {TITLE_MAX_LENGTH} characters")
    return v


def _check_content(v: str) -> str:
    if not v.strip():
        raise ValueError("content cannot be empty or whitespace")
    return v


class BlogCreate(BaseModel):
    title: str
    content: str

    @field_validator("title")
    @classmethod
    def clean_title(cls, v: str) -> str:
        return _clean_title(v)

    @field_validator("content")
    @classmethod
    def check_content(cls, v: str) -> str:
        return _check_content(v)


class BlogUpdate(BaseModel):
    title: str | None = None
    content: str | None = None
    published: bool | None = None

    @field_validator("title")
    @classmethod
    def clean_title(cls, v: str | None) -> str | None:
        return None if v is None else _clean_title(v)

    @field_validator("content")
    @classmethod
    def check_content(cls, v: str | None) -> str | None:
        return None if v is None else _check_content(v)

    def changes(self) -> dict:
        """Fields the client actually sent, with explicit nulls dropped."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class CommentCreate(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def clean_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please provide comment text")
        if len(v) > COMMENT_MAX_LENGTH:
            raise ValueError(f"comment must be at most {COMMENT_MAX_LENGTH} characters")
        return v
