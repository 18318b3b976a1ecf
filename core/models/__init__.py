# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for request/response payloads:
# - user.py: User, signup request and error message schemas
#
# These models define the "contract" between the examples and clients.
# =============================================================================

from .user import (
    MessageResponse,
    SignupRequest,
    User,
)

__all__ = [
    "MessageResponse",
    "SignupRequest",
    "User",
]
