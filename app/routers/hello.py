# =============================================================================
# app/routers/hello.py - Hello World Endpoint
# =============================================================================
# The smallest possible API: one plain-text route.
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "Hello world"


@router.get("/", response_class=PlainTextResponse)
async def hello():
    """Return a plain-text greeting."""
    return GREETING
