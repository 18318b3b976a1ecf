# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers, one per example surface:
# - hello.py: GET / plain-text greeting
# - users.py: Hardcoded user JSON and the signup echo endpoint
# - status.py: GET / reporting the configured environment
#
# Each router is mounted at the root path by its example's create_app().
# =============================================================================

from . import hello
from . import status
from . import users

__all__ = [
    "hello",
    "status",
    "users",
]
