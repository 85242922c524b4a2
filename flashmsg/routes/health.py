"""Infra endpoints: health."""

from fastapi import APIRouter

from flashmsg.config import get_settings
from flashmsg.flash import SESSION_KEY

router = APIRouter()


@router.get("/health", tags=["Infra"])
def health() -> dict[str, str]:
    """Report liveness plus the app name and the session key flash messages live under."""
    return {"status": "ok", "app": get_settings().app_name, "session_key": SESSION_KEY}
