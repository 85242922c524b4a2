"""Jinja integration and helpers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from flashmsg.deps import get_flash

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
    flash_types: str | Iterable[str] | None = None,
    with_flash: bool = True,
) -> HTMLResponse:
    """
    Render a template with the pending flash messages.

    Messages shown here are consumed. Pass with_flash=False for pages that
    must leave the queue alone (server errors).
    """
    flash = ""
    # Errors raised before the session middleware ran have no session to read
    if with_flash and "session" in request.scope:
        flash = get_flash(request).display(flash_types, emit=False) or ""
    ctx: dict[str, Any] = {"flash": flash}
    if context:
        ctx.update(context)
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
