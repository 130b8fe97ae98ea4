"""Error Handlers — global exception handlers producing the {success: false, ...} envelope.

Invariants:
    - BlogError → its http_status with {success, message, code}
    - RequestValidationError → 400 VALIDATION_ERROR; first field error becomes the
      message, every error listed under details
    - Starlette HTTPException (unknown route, wrong method) → envelope with its status
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (BlogError), validation (Pydantic), routing
      (HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogapi.core.errors import BlogError, ErrorSeverity

logger = logging.getLogger(__name__)

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_blog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_blog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BlogError)
    async def blog_error_handler(request: Request, exc: BlogError):
        """Handle all blog domain/infrastructure errors."""
        extra = {**exc.log_extra(), "path": request.url.path, "method": request.method}
        if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            logger.error(f"BlogError: {exc.message}", extra=extra)
        else:
            logger.warning(f"Rejected request: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": message, "code": "HTTP_ERROR"},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _error_field(loc: tuple) -> str:
    # loc starts with the request part ("body", "query", "path")
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _error_message(error: dict) -> str:
    msg = error["msg"]
    if msg.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        return msg[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
    return msg


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the validation envelope; the first error is the headline message."""
    errors = exc.errors()
    details = [
        {
            "field": _error_field(e["loc"]),
            "message": _error_message(e),
            "type": e["type"],
        }
        for e in errors
    ]
    if details:
        first = details[0]
        message = (
            f"{first['field']}: {first['message']}" if first["field"]
            else first["message"]
        )
    else:
        message = "Invalid request data"
    return {
        "success": False,
        "message": message,
        "code": "VALIDATION_ERROR",
        "details": details,
    }
