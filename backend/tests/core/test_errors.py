"""Error Hierarchy — verifies codes, HTTP statuses and the response envelope.

Tests:
    - Every error maps to its documented status and code
    - to_response() never carries internal context
    - log_extra() surfaces only the ids that are set
"""

import pytest

from blogapi.core.errors import (
    AlreadyLikedError, AuthenticationError, AuthorizationError, BlogError,
    ConcurrencyError, ConflictError, DatabaseError, ErrorContext,
    ExternalAuthError, InvalidTokenError, NotFoundError, NotLikedError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, status, code",
    [
        (ValidationError("bad"), 400, "VALIDATION_ERROR"),
        (AuthenticationError(), 401, "AUTHENTICATION_ERROR"),
        (InvalidTokenError(), 401, "INVALID_TOKEN"),
        (AuthorizationError(), 403, "FORBIDDEN"),
        (NotFoundError("Blog"), 404, "NOT_FOUND"),
        (ConflictError("User already exists"), 400, "CONFLICT"),
        (AlreadyLikedError(), 400, "ALREADY_LIKED"),
        (NotLikedError(), 400, "NOT_LIKED"),
        (ConcurrencyError("stale"), 409, "CONCURRENCY_CONFLICT"),
        (ExternalAuthError("down"), 502, "EXTERNAL_AUTH_ERROR"),
        (DatabaseError("lost", "execute"), 503, "DATABASE_ERROR"),
    ],
)
def test_error_status_and_code(error, status, code):
    assert isinstance(error, BlogError)
    assert error.http_status == status
    assert error.code == code


def test_invalid_token_is_an_authentication_error():
    assert isinstance(InvalidTokenError(), AuthenticationError)


def test_like_errors_are_conflicts_with_fixed_messages():
    assert isinstance(AlreadyLikedError(), ConflictError)
    assert AlreadyLikedError().message == "You already liked this blog"
    assert NotLikedError().message == "You have not liked this blog"


def test_not_found_message_names_resource():
    assert NotFoundError("Comment").message == "Comment not found"


def test_to_response_is_the_error_envelope():
    error = NotFoundError("Blog", ErrorContext(blog_id="b1", debug_info={"sql": "..."}))
    assert error.to_response() == {
        "success": False,
        "message": "Blog not found",
        "code": "NOT_FOUND",
    }


def test_log_extra_includes_only_set_ids():
    error = AuthorizationError(context=ErrorContext(user_id="u1", blog_id="b1"))
    assert error.log_extra() == {
        "error_code": "FORBIDDEN", "user_id": "u1", "blog_id": "b1",
    }


def test_database_error_message_names_operation():
    assert DatabaseError("timeout", "commit").message == "Database commit failed: timeout"
