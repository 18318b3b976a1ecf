# =============================================================================
# app/todo.py - Todo API Entry Point
# =============================================================================
# The configuration-aware example. Settings are loaded before anything
# else; if DB_URI is missing the process exits with status 1 and no
# listener is opened.
#
# Usage:
#   DB_URI=postgres://localhost/todo python -m app.todo
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.factory import create_app as build_app
from app.routers import status
from app.server import configure_logging, serve

HOST = "0.0.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the environment on startup and a notice on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting Todo API in {settings.APP_ENV} mode")

    yield

    logger.info("Shutting down Todo API")


def create_app() -> FastAPI:
    """Create the todo app with request logging enabled."""
    return build_app(
        status.router,
        title="Todo API",
        description="Environment-configured API with request logging.",
        request_logging=True,
        lifespan=lifespan,
    )


def main() -> int:
    """
    Load settings, then serve the todo app on the configured port.

    Raises:
        SystemExit: With status 1 if the settings are missing or invalid
    """
    configure_logging()
    settings = get_settings()

    if settings.is_development:
        logging.getLogger().setLevel(logging.DEBUG)

    serve(create_app(), HOST, settings.PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
