# =============================================================================
# app/json_response.py - JSON Response Server
# =============================================================================
# Hardcoded user payloads plus a signup endpoint that binds a JSON body
# and echoes it back.
#
# Usage:
#   python -m app.json_response
#   curl http://127.0.0.1:3000/user
#   curl -X POST http://127.0.0.1:3000/users \
#     -H "Content-Type: application/json" \
#     -d '{"email": "a@b.com"}'
# =============================================================================

from fastapi import FastAPI

from app.factory import create_app as build_app
from app.routers import users
from app.server import configure_logging, serve

HOST = "127.0.0.1"
PORT = 3000


def create_app() -> FastAPI:
    """Create the JSON response app."""
    return build_app(
        users.router,
        title="JSON Response",
        description="Returning and binding JSON payloads.",
    )


def main() -> int:
    """Serve the JSON response app until interrupted."""
    configure_logging()
    serve(create_app(), HOST, PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
