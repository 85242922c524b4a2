"""Basic logging configuration."""

import logging

from flashmsg.config import get_settings


def configure_logging() -> None:
    """Configure logging for the application."""
    # Keep simple, Uvicorn config remains for access logs
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
