"""Application middlewares (sessions)."""

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from flashmsg.config import get_settings


def install_middlewares(app: FastAPI) -> None:
    """Install the session middleware that backs the flash queue."""
    settings = get_settings()
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        https_only=settings.https_only,
    )
