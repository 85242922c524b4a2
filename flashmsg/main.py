"""API entrypoint and composition."""

from pathlib import Path

from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from flashmsg.config import get_settings
from flashmsg.errors import register_exception_handlers
from flashmsg.flash import FlashConfig, Sanitizer
from flashmsg.logging import configure_logging
from flashmsg.middleware import install_middlewares
from flashmsg.routes import flash, health, home
from flashmsg.routes import infra as infra_routes

configure_logging()


def create_app(
    *,
    force_debug: bool | None = None,
    flash_config: FlashConfig | None = None,
    sanitizer: Sanitizer | None = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    force_debug:
        - None: use settings.debug.
        - True: enable debug mode.
        - False: force non-debug mode (for 500.html testing).
    flash_config:
        Presentation settings for rendered messages; defaults to FlashConfig().
    sanitizer:
        Output sanitizer for rendered messages; defaults to HtmlSanitizer().
    """
    # Clear cached settings to ensure fresh config on app creation (tests with monkeypatch)
    get_settings.cache_clear()
    settings = get_settings()

    debug = settings.debug if force_debug is None else bool(force_debug)
    app = FastAPI(title=settings.app_name, debug=debug)

    # Presentation config lives on the app, never in the session
    app.state.flash_config = flash_config or FlashConfig()
    app.state.flash_sanitizer = sanitizer

    static_dir = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # Middlewares
    install_middlewares(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(home.router)
    app.include_router(flash.router)
    app.include_router(infra_routes.router)

    # Error handlers
    register_exception_handlers(app)

    return app


app = create_app()
