"""Request-scoped dependencies."""

from fastapi import Request

from flashmsg.flash import FlashConfig, FlashMessages
from flashmsg.utils.htmx import is_htmx


def get_flash(request: Request) -> FlashMessages:
    """Bind a flash manager to the current session and the app's presentation config."""
    config: FlashConfig | None = getattr(request.app.state, "flash_config", None)
    sanitizer = getattr(request.app.state, "flash_sanitizer", None)
    return FlashMessages(
        request.session,
        config,
        sanitizer=sanitizer,
        htmx=is_htmx(request),
    )
