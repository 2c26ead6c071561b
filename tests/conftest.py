"""Shared fixtures: an isolated content root per test and an ASGI client."""

import json
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from portfolio.main import app
from portfolio.services.blog import get_blog_service
from portfolio.services.captcha import get_captcha_store
from portfolio.services.projects import get_project_service
from portfolio.settings import get_settings

ADMIN_KEY = "test-admin-key"

CONTACT_INFO = {"email": "me@example.com", "phone": "+1 555 0100"}


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_blog_service.cache_clear()
    get_project_service.cache_clear()
    get_captcha_store.cache_clear()


@pytest.fixture(autouse=True)
def content_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every content path at a fresh temp directory."""
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "contact.json").write_text(json.dumps(CONTACT_INFO), encoding="utf-8")

    monkeypatch.setenv("BLOG_ROOT", str(tmp_path / "blog"))
    monkeypatch.setenv("PROJECTS_FILE", str(tmp_path / "data" / "projects.json"))
    monkeypatch.setenv("CONTACT_FILE", str(tmp_path / "config" / "contact.json"))
    monkeypatch.setenv("ADMIN_AUTH_FILE", str(tmp_path / "config" / "blog-auth.json"))
    monkeypatch.setenv("ADMIN_API_KEY", ADMIN_KEY)
    monkeypatch.setenv("CAPTCHA_BACKEND", "memory")
    monkeypatch.delenv("CAPTCHA_DIFFICULTY", raising=False)

    _clear_caches()
    yield tmp_path
    _clear_caches()


@pytest.fixture
async def client():
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-API-Key": ADMIN_KEY}
