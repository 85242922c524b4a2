import pytest
from httpx import ASGITransport, AsyncClient

from flashmsg.main import create_app


@pytest.mark.anyio
async def test_health_reports_app_and_session_key(monkeypatch) -> None:
    monkeypatch.setenv("FLASH_APP_NAME", "Notices")
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "Notices", "session_key": "flash_messages"}


@pytest.mark.anyio
async def test_home_renders_flash_container_without_session_cookie() -> None:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/")
    assert resp.status_code == 200
    assert 'id="flash"' in resp.text
    # Nothing queued, so the session stays empty and no cookie is issued
    assert "set-cookie" not in resp.headers
