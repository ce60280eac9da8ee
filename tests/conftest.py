"""
Shared fixtures: an app wired to a throwaway SQLite database.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config.settings import Settings
from database.session import init_db
from main import create_app

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        create_tables=False,
    )


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    await init_db(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def session_factory(app):
    return app.state.session_factory


async def signup_and_login(client, email="a@x.com", password="pw", name="A", role="user"):
    """Register a user through the API and return the login response body."""
    resp = await client.post(
        "/api/signup",
        json={"name": name, "email": email, "password": password, "role": role},
    )
    assert resp.status_code == 201
    resp = await client.post("/api/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp.json()
