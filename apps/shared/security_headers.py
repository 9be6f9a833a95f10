"""Security headers for the API services."""

from fastapi import FastAPI, Request
from fastapi.responses import Response


DEFAULT_CSP = (
    "default-src 'self'; "
    "img-src 'self' data: https:; "
    "script-src 'self' 'unsafe-inline'; "
    "style-src 'self' 'unsafe-inline'; "
    "connect-src 'self'"
)

# Only set when the handler did not choose its own value
DEFAULT_HEADERS = {
    "Content-Security-Policy": DEFAULT_CSP,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Cache-Control": "no-cache, no-store, must-revalidate",
}


def setup_security_headers(app: FastAPI, headers: dict[str, str] | None = None) -> None:
    """Add the default security headers to every response."""
    extra = dict(DEFAULT_HEADERS if headers is None else headers)

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        for name, value in extra.items():
            response.headers.setdefault(name, value)
        return response
