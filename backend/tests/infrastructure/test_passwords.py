"""Password Hashing — verifies bcrypt hashing and safe verification."""

from blogapi.infrastructure.passwords import get_password_hash, verify_password


def test_hash_is_not_the_plain_password():
    hashed = get_password_hash("admin123")
    assert hashed != "admin123"
    assert hashed.startswith("$2")


def test_verify_accepts_correct_password():
    assert verify_password("admin123", get_password_hash("admin123"))


def test_verify_rejects_wrong_password():
    assert not verify_password("wrong", get_password_hash("admin123"))


def test_verify_is_false_for_missing_hash():
    assert not verify_password("anything", None)


def test_verify_is_false_for_malformed_hash():
    assert not verify_password("anything", "not-a-bcrypt-hash")
