# =============================================================================
# core/ - Shared Models Package
# =============================================================================
# This package contains framework-agnostic code:
# - models/: Pydantic schemas for request and response payloads
#
# Code in this package should NOT import from FastAPI.
# This keeps the models testable on their own.
# =============================================================================
