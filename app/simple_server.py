# =============================================================================
# app/simple_server.py - Hello World Server
# =============================================================================
# A FastAPI app with a single GET / route returning "Hello world",
# served on a free port picked by the OS.
#
# Usage:
#   python -m app.simple_server
# =============================================================================

from fastapi import FastAPI

from app.factory import create_app as build_app
from app.routers import hello
from app.server import configure_logging, serve

HOST = "0.0.0.0"
PORT = 0


def create_app() -> FastAPI:
    """Create the hello world app."""
    return build_app(
        hello.router,
        title="Simple Server",
        description="Hello world over HTTP.",
    )


def main() -> int:
    """Serve the hello world app until interrupted."""
    configure_logging()
    serve(create_app(), HOST, PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
