import os
import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from filmorate_api.main import app
from filmorate_api.core.config import settings
from filmorate_api.db.memory import close_storage


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["SENTRY_DSN"] = ""  # no Sentry in tests
    settings.sentry_dsn = ""


@pytest.fixture(autouse=True)
def clean_db():
    """Every test starts with empty repositories and ids from 1."""
    close_storage()
    yield
    close_storage()


@pytest.fixture
async def client():
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport,
                               base_url="http://test") as ac:
            yield ac
