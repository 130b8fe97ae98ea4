"""Session Tokens — verifies issuance and validation of signed bearer tokens.

Invariants:
    - A freshly issued token validates back to the same user id
    - Expired, tampered and foreign-secret tokens raise InvalidTokenError
    - Default lifetime is 7 days
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from blogapi.config import get_settings
from blogapi.core.errors import InvalidTokenError
from blogapi.infrastructure.session_tokens import issue_token, validate_token


def test_issued_token_validates_to_user_id():
    user_id = uuid4()
    assert validate_token(issue_token(user_id)) == user_id


def test_default_expiry_is_seven_days():
    now = datetime.now(timezone.utc).replace(microsecond=0)
    token = issue_token(uuid4(), now=now)
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_rejected():
    past = datetime.now(timezone.utc) - timedelta(days=8)
    token = issue_token(uuid4(), now=past)
    with pytest.raises(InvalidTokenError, match="Token expired"):
        validate_token(token)


def test_tampered_token_is_rejected():
    token = issue_token(uuid4())
    tampered = token[:-2] + ("AA" if not token.endswith("AA") else "BB")
    with pytest.raises(InvalidTokenError):
        validate_token(tampered)


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode(
        {"sub": str(uuid4()), "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret", algorithm=get_settings().jwt_algorithm,
    )
    with pytest.raises(InvalidTokenError, match="Invalid token"):
        validate_token(token)


def test_token_without_uuid_subject_is_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "not-a-uuid", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(InvalidTokenError):
        validate_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidTokenError):
        validate_token("not.a.token")
