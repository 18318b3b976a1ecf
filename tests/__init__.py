# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the example apps:
# - test_models.py: Pydantic model validation
# - test_config.py: Settings loading and the DB_URI fail-fast check
# - test_simple_server.py, test_json_response.py, test_todo.py: endpoints
# - test_server.py: logging setup and the uvicorn listener
#
# Run tests with: pytest
# =============================================================================
