"""Error Hierarchy — typed, categorized exceptions for every blog API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the API envelope {success: false, message, code}
    - Login failures share one message regardless of cause (no account enumeration)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error (logged, never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    blog_id: str | None = None
    comment_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BlogError(Exception):
    """Base exception for all blog API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard API error envelope."""
        return {
            "success": False,
            "message": self.message,
            "code": self.code,
        }

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        extra: dict[str, Any] = {"error_code": self.code}
        for key in ("user_id", "blog_id", "comment_id"):
            value = getattr(self.context, key)
            if value is not None:
                extra[key] = value
        return extra


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(BlogError):
    """Request input failed validation."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class AuthenticationError(BlogError):
    """Caller could not be authenticated."""
    def __init__(
        self, message: str = "Not authorized, please log in",
        code: str = "AUTHENTICATION_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(AuthenticationError):
    """Bearer token has a bad signature, is malformed, or has expired."""
    def __init__(
        self, message: str = "Invalid token", context: ErrorContext | None = None,
    ):
        super().__init__(message, "INVALID_TOKEN", context)


class AuthorizationError(BlogError):
    """Authenticated caller is not allowed to perform the action."""
    def __init__(
        self, message: str = "Forbidden", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class NotFoundError(BlogError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource_type} not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type


class ConflictError(BlogError):
    """Request conflicts with existing state (duplicate email, repeated like)."""
    def __init__(
        self, message: str, code: str = "CONFLICT",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class AlreadyLikedError(ConflictError):
    """User tried to like a blog they already like."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("You already liked this blog", "ALREADY_LIKED", context)


class NotLikedError(ConflictError):
    """User tried to unlike a blog they do not like."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("You have not liked this blog", "NOT_LIKED", context)


class ConcurrencyError(BlogError):
    """Concurrent modification detected (stale row version)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ExternalAuthError(BlogError):
    """OAuth provider failed or returned an unusable profile."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "EXTERNAL_AUTH_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )


class DatabaseError(BlogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
