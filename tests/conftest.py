from unittest.mock import AsyncMock

import pytest
from fakeredis import FakeAsyncRedis, FakeServer

from resource_downloader.domain.interfaces.services import IUserLimitClient
from resource_downloader.domain.value_objects.user_limit import UserLimit
from resource_downloader.infrastructure.repositories.in_memory_downloader_repository import (
    InMemoryDownloaderRepository,
)
from resource_downloader.infrastructure.repositories.redis_downloader_repository import (
    RedisDownloaderRepository,
)


@pytest.fixture
def memory_repository():
    return InMemoryDownloaderRepository()


@pytest.fixture
def fake_redis():
    return FakeAsyncRedis(server=FakeServer(), decode_responses=True)


@pytest.fixture
def redis_repository(fake_redis):
    return RedisDownloaderRepository(fake_redis)


@pytest.fixture
def limit_client():
    """User-limit client answering limit=10 for any user."""
    client = AsyncMock(spec=IUserLimitClient)

    async def _fetch_limit(user_id: str) -> UserLimit:
        return UserLimit(user_id=user_id, limit=10)

    client.fetch_limit.side_effect = _fetch_limit
    return client
