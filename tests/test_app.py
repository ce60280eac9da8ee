"""
Tests for application wiring.
"""

import pytest

from config.settings import Settings
from main import create_app
from utils.errors import ConfigurationError


def test_missing_secret_fails_at_startup(tmp_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'x.db'}",
        jwt_secret="",
    )
    with pytest.raises(ConfigurationError):
        create_app(settings)


def test_default_port_and_expiry(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("JWT_EXPIRY_SECONDS", raising=False)
    settings = Settings(jwt_secret="s")
    assert settings.port == 5000
    assert settings.jwt_expiry_seconds == 3600


@pytest.mark.asyncio
async def test_index_and_timing_header(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "Project Backend" in resp.text
    assert "X-Process-Time" in resp.headers
