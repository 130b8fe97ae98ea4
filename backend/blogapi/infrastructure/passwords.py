"""Password Hashing — bcrypt via passlib's CryptContext.

Invariants:
    - Plain passwords are never stored or logged
    - verify_password is False (never raises) for a missing or malformed hash
"""

from functools import lru_cache

from passlib.context import CryptContext

from blogapi.config import get_settings


@lru_cache
def _context(rounds: int) -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
    )


def _pwd_context() -> CryptContext:
    return _context(get_settings().bcrypt_rounds)


def get_password_hash(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        return False
