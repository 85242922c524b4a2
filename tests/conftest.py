import pytest

from flashmsg.flash import FlashMessages, passthrough


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch) -> None:
    monkeypatch.setenv("FLASH_SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("FLASH_ENV", "test")


@pytest.fixture
def session() -> dict:
    return {}


@pytest.fixture
def flash(session) -> FlashMessages:
    """Manager over a plain dict session with no sanitization."""
    return FlashMessages(session, sanitizer=passthrough)
