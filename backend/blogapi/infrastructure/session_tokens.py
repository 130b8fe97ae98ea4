"""Session Issuance — signed, tamper-evident bearer tokens binding a user id and expiry.

Invariants:
    - Token claims: sub (user UUID as str), iat, exp
    - exp = issuance time + jwt_expire_days (default 7)
    - validate_token() returns the user id or raises InvalidTokenError; it never
      touches the database
    - No revocation list: tokens stay valid until exp
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from blogapi.config import get_settings
from blogapi.core.errors import InvalidTokenError


def issue_token(
    user_id: UUID,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    settings = get_settings()
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(days=settings.jwt_expire_days))
    claims = {"sub": str(user_id), "iat": issued_at, "exp": expire}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def validate_token(token: str) -> UUID:
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError:
        raise InvalidTokenError("Token expired")
    except JWTError:
        raise InvalidTokenError("Invalid token")

    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenError("Invalid token")
    try:
        return UUID(subject)
    except (TypeError, ValueError):
        raise InvalidTokenError("Invalid token")
