# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the example web applications:
# - simple_server.py, json_response.py, todo.py: example entry points
# - config.py: Environment variable loading and settings
# - exceptions.py, middleware.py: error responses and request logging
# - factory.py, server.py: app construction and the uvicorn listener
# - routers/: API endpoint definitions
# =============================================================================
