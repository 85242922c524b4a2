"""HTMX helpers."""

from fastapi import Request, Response


def is_htmx(request: Request) -> bool:
    """Check if request is from HTMX."""
    return request.headers.get("HX-Request", "false").lower() == "true"


def hx_redirect(url: str, status_code: int = 204) -> Response:
    """
    Redirect an HTMX client via the HX-Redirect header.
    Plain browsers get a 303 RedirectResponse from FlashMessages.finalize instead.
    """
    return Response(status_code=status_code, headers={"HX-Redirect": url})
