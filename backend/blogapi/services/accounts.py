"""Account Service — registration, password login, Google sign-in and admin seeding.

Invariants:
    - Emails are compared lower-cased; one account per email (unique constraint backs the check)
    - Unknown email, OAuth-only account and wrong password all raise the same
      AuthenticationError("Invalid email or password")
    - Every successful register/login/oauth_upsert returns (user, session token)
    - oauth_upsert only fills profile fields that are still empty
    - oauth_upsert refuses a profile whose provider marks the email unverified
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.core.domain_types import Role
from blogapi.core.errors import (
    AuthenticationError, ConflictError, ErrorContext, ExternalAuthError,
    ValidationError,
)
from blogapi.infrastructure.passwords import get_password_hash, verify_password
from blogapi.infrastructure.session_tokens import issue_token
from blogapi.models.user import User
from blogapi.schemas.auth import ProviderProfile

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AccountService:
    """Credential store operations over a single DB session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email.strip().lower()),
        )
        return result.scalar_one_or_none()

    async def get_user(self, user_id: UUID) -> User:
        """Resolve the account behind a validated session token."""
        user = await self.db.get(User, user_id)
        if user is None:
            raise AuthenticationError(
                "Not authorized, user not found",
                context=ErrorContext(user_id=str(user_id)),
            )
        return user

    async def register(
        self, email: str, password: str, name: str,
    ) -> tuple[User, str]:
        email = (email or "").strip().lower()
        name = (name or "").strip()
        if not email or not password or not name:
            raise ValidationError("Please provide email, password, and name")

        if await self.find_by_email(email):
            raise ConflictError("User already exists", "USER_EXISTS")

        user = User(
            email=email,
            name=name,
            password_hash=get_password_hash(password),
            role=Role.USER.value,
            profile_image=None,
            google_id=None,
        )
        await self._insert_user(user)
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user, issue_token(user.id)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        if not email or not password:
            raise ValidationError("Please provide email and password")

        user = await self.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS, "INVALID_CREDENTIALS")
        return user, issue_token(user.id)

    async def oauth_upsert(self, profile: ProviderProfile) -> tuple[User, str]:
        """Find or create the account for an identity asserted by the OAuth provider."""
        if not profile.email:
            raise ExternalAuthError("OAuth provider did not supply an email address")
        if profile.email_verified is False:
            raise ExternalAuthError("Google account email is not verified")

        user = await self.find_by_email(profile.email)
        if user is None:
            user = User(
                email=profile.email,
                name=(profile.name or profile.email.split("@")[0]).strip(),
                password_hash=None,
                role=Role.USER.value,
                profile_image=profile.picture,
                google_id=profile.sub,
            )
            await self._insert_user(user)
            logger.info(
                "User created from OAuth profile", extra={"user_id": str(user.id)},
            )
        else:
            changed = False
            if not user.profile_image and profile.picture:
                user.profile_image = profile.picture
                changed = True
            if not user.google_id and profile.sub:
                user.google_id = profile.sub
                changed = True
            if changed:
                await self.db.commit()
        return user, issue_token(user.id)

    async def seed_admin(self, email: str, password: str, name: str) -> bool:
        """Create the admin account unless the email is already taken."""
        if await self.find_by_email(email):
            logger.info("Admin already exists")
            return False
        user = User(
            email=email.strip().lower(),
            name=name,
            password_hash=get_password_hash(password),
            role=Role.ADMIN.value,
            profile_image=None,
            google_id=None,
        )
        await self._insert_user(user)
        logger.info("Admin user created", extra={"user_id": str(user.id)})
        return True

    async def _insert_user(self, user: User) -> None:
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("User already exists", "USER_EXISTS")
