"""Request Dependencies — bearer-token resolution for protected and optional-auth routes.

Invariants:
    - get_current_user: missing token → AuthenticationError; bad/expired token →
      InvalidTokenError; token for a deleted account → AuthenticationError
    - get_optional_user never raises for token problems: the caller is anonymous instead
    - Only the "Authorization: Bearer <token>" header is read
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.core.errors import AuthenticationError
from blogapi.infrastructure.database import get_db
from blogapi.infrastructure.session_tokens import validate_token
from blogapi.models.user import User
from blogapi.services.accounts import AccountService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authorized, no token", "NO_TOKEN")
    user_id = validate_token(credentials.credentials)
    return await AccountService(db).get_user(user_id)


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User | None:
    if credentials is None or not credentials.credentials:
        return None
    try:
        user_id = validate_token(credentials.credentials)
        return await AccountService(db).get_user(user_id)
    except AuthenticationError as e:
        logger.debug(f"Ignoring unusable token on optional-auth route: {e.message}")
        return None
