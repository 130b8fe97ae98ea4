"""Auth Schemas — request bodies for registration/login and the OAuth provider profile.

Invariants:
    - Emails are trimmed and lower-cased before reaching the services
    - RegisterRequest: every field required and non-blank; password 1-72 chars (bcrypt limit)
    - LoginRequest accepts any non-blank email string (format errors must not differ
      from "invalid email or password")
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


def _strip_required(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{field_name} cannot be empty")
    return value


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)
    name: str = Field(min_length=1, max_length=200)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v, "name")

    @field_validator("password")
    @classmethod
    def reject_blank_password(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password cannot be empty")
        return v


class LoginRequest(BaseModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _strip_required(v, "email").lower()


class ProviderProfile(BaseModel):
    """Identity asserted by an external OAuth provider (OpenID userinfo claims)."""
    email: str | None = None
    name: str | None = None
    picture: str | None = None
    sub: str | None = None
    email_verified: bool | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip().lower() or None
