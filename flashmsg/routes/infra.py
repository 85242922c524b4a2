"""Infra/diagnostic routes (non-prod helpers)."""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from flashmsg.config import get_settings
from flashmsg.deps import get_flash
from flashmsg.flash import FlashMessages

router = APIRouter()


@router.get("/demo/flash", tags=["infra"])
def demo_flash(
    msg: str = "Operation completed",
    kind: str = Query("success", alias="type"),
    sticky: bool = False,
    next_url: str = Query("/", alias="next"),
    flash: FlashMessages = Depends(get_flash),
) -> Response:
    """Queue a one-time message and redirect (HTMX-aware)."""
    if not flash.add(msg, kind, redirect_to=next_url, sticky=sticky):
        raise HTTPException(400, "Message text is required")
    return flash.finalize()


@router.get("/demo/flash/halt", tags=["infra"])
def demo_flash_halt(
    msg: str = "Operation completed", flash: FlashMessages = Depends(get_flash)
) -> None:
    """Queue a message and end the request from inside finalize."""
    flash.info(msg, redirect_to="/")
    flash.finalize(halt=True)


@router.get("/demo/flash/unrouted", tags=["infra"])
def demo_flash_unrouted(flash: FlashMessages = Depends(get_flash)) -> Response:
    """Queue a message without any redirect target: finalize reports a failure."""
    flash.warning("This message has nowhere to go")
    return flash.finalize()


@router.get("/debug/error", tags=["infra"])
def debug_error() -> None:
    """Intentionally raise an error to exercise the 500 handler in non-prod."""
    settings = get_settings()
    if settings.env == "prod":
        raise HTTPException(404, "Not found")
    raise RuntimeError("Simulated failure for testing purposes")
