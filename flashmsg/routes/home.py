"""Web routes (HTML) using Jinja2 + HTMX."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from flashmsg.config import get_settings
from flashmsg.web import render

router = APIRouter()


@router.get("/", response_class=HTMLResponse, tags=["web"])
def index(request: Request) -> HTMLResponse:
    """Render home page, showing any messages queued by the previous request."""
    return render(request, "index.html", {"title": get_settings().app_name})
