"""Exceptions that end a request after messages are queued."""

from __future__ import annotations

from fastapi import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

GENERIC_FAILURE = "Something went wrong. Please try again."


class RedirectNotConfigured(StarletteHTTPException):
    """A message was queued but nothing said where to send the user next."""

    def __init__(self) -> None:
        super().__init__(status_code=500, detail=GENERIC_FAILURE)


class FlashRedirect(Exception):
    """Carries a ready redirect response up to the exception handlers."""

    def __init__(self, response: Response) -> None:
        super().__init__(response.headers.get("location") or response.headers.get("HX-Redirect"))
        self.response = response
