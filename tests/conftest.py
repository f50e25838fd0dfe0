"""
Shared fixtures: an app wired to a throwaway SQLite database.
"""

import httpx
import pytest
import pytest_asyncio

from config.settings import Settings
from database.session import create_tables
from main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-jwt-secret",
        cookie_secret="test-cookie-secret",
        bcrypt_rounds=4,
        environment="development",
        vercel="",
    )


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    await create_tables(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
