"""Flash message endpoints for HTMX fragments and status polling."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse

from flashmsg.deps import get_flash
from flashmsg.flash import FlashMessages

router = APIRouter(prefix="/flash", tags=["flash"])


@router.get("", response_class=HTMLResponse)
def flash_fragment(
    types: Optional[list[str]] = Query(None),
    flash: FlashMessages = Depends(get_flash),
) -> HTMLResponse:
    """Render pending messages as an HTML fragment; they are consumed."""
    flash.display(types)
    return HTMLResponse(flash.output.getvalue())


@router.get("/status")
def flash_status(flash: FlashMessages = Depends(get_flash)) -> dict:
    """Pending counts per type, without consuming anything."""
    return {"has_errors": flash.has_errors(), "pending": flash.pending_counts()}


@router.post("/clear", status_code=204)
def flash_clear(
    types: Optional[list[str]] = Query(None),
    flash: FlashMessages = Depends(get_flash),
) -> Response:
    """Discard pending messages (all of them when no types are given)."""
    flash.clear(types)
    return Response(status_code=204)
