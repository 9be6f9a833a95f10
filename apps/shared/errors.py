"""
Error handling

Maps exceptions raised inside the API to a consistent JSON error payload
and keeps internal details (tracebacks, SQL) in the server log only.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "GET /api/blogs")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Short id lets a client report be matched to the log line
    error_id = str(uuid.uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error,
    )

    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


def error_response(
    message: str,
    category: str,
    status_code: int,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(
        status_code=status_code,
        headers=headers,
        content={
            "error": message,
            "category": category,
        },
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. "body.title: Field required"."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request."


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(
        message=format_validation_errors(exc),
        category="validation",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = (
        detail.get("message") if isinstance(detail, dict) else str(detail)
    ) or "Request failed."

    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        # Starlette's default for paths with no route
        message = "unknown endpoint"

    category = "server_error" if exc.status_code >= 500 else "client_error"

    return error_response(
        message=message,
        category=category,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s", request.url.path, exc_info=exc)
    return error_response(
        message="A database error occurred while processing the request.",
        category="database",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def unexpected_exception_handler(request: Request, exc: Exception):
    message, _ = log_and_sanitize_error(exc, f"{request.method} {request.url.path}")
    return error_response(
        message=message,
        category="server_error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on a FastAPI app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
