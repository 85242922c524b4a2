import pytest
from httpx import ASGITransport, AsyncClient

from flashmsg.main import create_app


@pytest.mark.anyio
async def test_404_page_shows_and_consumes_pending_messages() -> None:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        await ac.get("/demo/flash?msg=Moved elsewhere&type=warning&next=/gone")
        resp = await ac.get("/gone")
        assert resp.status_code == 404
        assert "Page not found" in resp.text
        assert "Moved elsewhere" in resp.text

        status = await ac.get("/flash/status")
        assert status.json()["pending"]["warning"] == 0


@pytest.mark.anyio
async def test_500_page_leaves_pending_messages_queued(monkeypatch) -> None:
    monkeypatch.setenv("FLASH_DEBUG", "false")

    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://test"
    ) as ac:
        await ac.get("/demo/flash?msg=Still here&type=error")
        resp = await ac.get("/debug/error")
        assert resp.status_code == 500
        assert "Server error" in resp.text
        assert "Still here" not in resp.text

        home = await ac.get("/")
        assert "Still here" in home.text


@pytest.mark.anyio
async def test_debug_error_hidden_in_prod(monkeypatch) -> None:
    monkeypatch.setenv("FLASH_ENV", "prod")

    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/debug/error")

    assert resp.status_code == 404


@pytest.mark.anyio
async def test_422_page_for_bad_query() -> None:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/demo/flash?sticky=maybe")

    assert resp.status_code == 422
    assert "Invalid request" in resp.text
