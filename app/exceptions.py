# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the example apps.
# Every error response has the same shape: {"message": "..."}
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class QuickstartException(Exception):
    """
    Base exception for the example apps.

    All custom exceptions inherit from this class and are rendered
    by `quickstart_exception_handler`.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        """Convert exception to API response dict."""
        return {"message": self.message}


class InvalidPayloadError(QuickstartException):
    """Raised when a request body cannot be decoded into its model."""

    def __init__(self):
        super().__init__(
            message="invalid request payload",
            status_code=400,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def quickstart_exception_handler(
    request: Request,
    exc: QuickstartException
) -> JSONResponse:
    """Convert QuickstartException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body binding errors.

    Malformed JSON and wrong value types collapse into a single 400
    response.
    """
    logger.warning(
        f"Rejected payload for {request.method} {request.url.path}: {exc.errors()}"
    )
    return await quickstart_exception_handler(request, InvalidPayloadError())


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (404, 405) as {"message": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "internal server error"},
    )


def register_exception_handlers(app) -> None:
    """Attach every handler above to a FastAPI app."""
    app.add_exception_handler(QuickstartException, quickstart_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
