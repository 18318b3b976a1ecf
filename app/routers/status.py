# =============================================================================
# app/routers/status.py - Todo API Status Endpoint
# =============================================================================
# Reports which environment the API is running in.
# =============================================================================

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.config import Settings, get_settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def status(settings: Settings = Depends(get_settings)):
    """Return `Todo API running in <APP_ENV> mode`."""
    return f"Todo API running in {settings.APP_ENV} mode"
