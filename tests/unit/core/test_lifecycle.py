import httpx
import pytest
from redis.asyncio import Redis

from resource_downloader.core.application import create_application
from resource_downloader.core.config.settings import settings
from resource_downloader.infrastructure.repositories.in_memory_downloader_repository import (
    InMemoryDownloaderRepository,
)


pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_lifespan_with_memory_backend(monkeypatch):
    monkeypatch.setattr(settings, "CACHE_BACKEND", "memory")
    app = create_application()

    async with app.router.lifespan_context(app):
        assert app.state.redis is None
        assert isinstance(app.state.memory_repository, InMemoryDownloaderRepository)
        assert isinstance(app.state.http_client, httpx.AsyncClient)

    assert app.state.http_client.is_closed


@pytest.mark.asyncio
async def test_lifespan_with_redis_backend(monkeypatch):
    monkeypatch.setattr(settings, "CACHE_BACKEND", "redis")
    app = create_application()

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.redis, Redis)
        assert app.state.memory_repository is None

    assert app.state.http_client.is_closed


@pytest.mark.asyncio
async def test_redis_is_closed_when_http_client_close_fails(monkeypatch, mocker):
    monkeypatch.setattr(settings, "CACHE_BACKEND", "redis")
    redis = mocker.AsyncMock(spec=Redis)
    mocker.patch("resource_downloader.core.lifecycle.create_redis_client", return_value=redis)
    mocker.patch.object(httpx.AsyncClient, "aclose", side_effect=RuntimeError("close failed"))
    app = create_application()

    with pytest.raises(RuntimeError, match="close failed"):
        async with app.router.lifespan_context(app):
            assert app.state.redis is redis

    redis.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_clients_are_closed_when_app_body_fails(monkeypatch):
    monkeypatch.setattr(settings, "CACHE_BACKEND", "memory")
    app = create_application()

    with pytest.raises(RuntimeError):
        async with app.router.lifespan_context(app):
            raise RuntimeError("startup hook failed")

    assert app.state.http_client.is_closed
