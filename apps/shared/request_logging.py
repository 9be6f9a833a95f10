"""Request logging for API services."""

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.responses import Response

logger = logging.getLogger("bloglist.requests")


def setup_logging() -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def setup_request_logging(app: FastAPI) -> None:
    """Log method, path, status and duration of every request."""
    # Test runs stay quiet
    enabled = os.getenv("ENVIRONMENT", "development") != "test"

    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        if not enabled:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
