# =============================================================================
# app/middleware.py - Request Logging Middleware
# =============================================================================
# Logs one line per request: method, path, status and latency.
# Installed by apps created with request_logging=True.
# =============================================================================

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: HTTP request
            call_next: Next middleware/handler

        Returns:
            HTTP response
        """
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            latency_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {uri} - {exc} ({latency_ms:.2f}ms)"
            )
            raise

        latency_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {uri} {response.status_code} {latency_ms:.2f}ms"
        )
        return response
