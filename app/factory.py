# =============================================================================
# app/factory.py - FastAPI Application Factory
# =============================================================================
# Builds the FastAPI instance shared by every example: exception handlers,
# the optional request logger and the example's routers.
# =============================================================================

from fastapi import APIRouter, FastAPI

from app.exceptions import register_exception_handlers
from app.middleware import RequestLoggingMiddleware


def create_app(
    *routers: APIRouter,
    title: str,
    description: str = "",
    request_logging: bool = False,
    lifespan=None,
) -> FastAPI:
    """
    Create a FastAPI app serving the given routers.

    Args:
        *routers: Routers to mount at the root path
        title: OpenAPI title
        description: OpenAPI description
        request_logging: Install RequestLoggingMiddleware
        lifespan: Optional lifespan context manager

    Returns:
        FastAPI: The configured application
    """
    app = FastAPI(
        title=title,
        description=description,
        version="1.0.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    if request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    for router in routers:
        app.include_router(router)

    return app
