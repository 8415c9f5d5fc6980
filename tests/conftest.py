import logging

import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from filmorate_api.main import create_app
from filmorate_api.core.config import Settings
from filmorate_api.services.context import ServiceContext, memory_storages


@pytest.fixture
def test_settings() -> Settings:
    # in-memory storage, no Sentry
    return Settings(storage_backend="memory", sentry_dsn="", env="test")


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
async def client(app):
    """Fresh app (and therefore fresh in-memory storage) per test."""
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport,
                               base_url="http://test") as ac:
            yield ac


@pytest.fixture
def ctx() -> ServiceContext:
    return ServiceContext(storages=memory_storages(),
                          log=logging.getLogger("tests.services"))
