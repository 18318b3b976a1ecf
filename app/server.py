# =============================================================================
# app/server.py - Logging Setup and HTTP Listener
# =============================================================================
# Helpers the example entry points share:
# - configure_logging(): process-wide logging format
# - serve(): run an app on uvicorn until it stops
# =============================================================================

import logging

import uvicorn
from fastapi import FastAPI

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for an example process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def serve(app: FastAPI, host: str, port: int, log_level: str = "info") -> None:
    """
    Run `app` on uvicorn. Blocks until the server stops.

    Port 0 asks the OS for a free port. uvicorn handles Ctrl+C itself.
    Bind failures are reported by uvicorn, which then ends the process;
    nothing is retried.

    Args:
        app: ASGI application to serve
        host: Interface to bind
        port: TCP port to bind
        log_level: uvicorn log level
    """
    logger.info(f"Starting {app.title} on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level)
    logger.info(f"{app.title} stopped")
