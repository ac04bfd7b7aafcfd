"""Dependencies for the download services.

This module wires the download domain service to its infrastructure:
the cache repository selected by `CACHE_BACKEND`, the HTTP user-limit client,
and the cache-aside repository composing them. Shared clients live on
`app.state` and are created by the application lifespan.
"""

from typing import Annotated, Optional

import httpx
from fastapi import Depends, Request
from redis.asyncio import Redis

from resource_downloader.core.config.settings import settings
from resource_downloader.domain.interfaces.repositories import IResourceDownloaderRepository
from resource_downloader.domain.interfaces.services import IDownloadService, IUserLimitClient
from resource_downloader.domain.services.download.download_service import DownloadService
from resource_downloader.infrastructure.repositories.cached_external_downloader_repository import (
    CachedExternalDownloaderRepository,
)
from resource_downloader.infrastructure.repositories.redis_downloader_repository import (
    RedisDownloaderRepository,
)
from resource_downloader.infrastructure.services.user_service_client import HttpUserServiceClient


def get_redis_client(request: Request) -> Optional[Redis]:
    """Return the process-wide Redis client, None for the memory backend."""
    return request.app.state.redis


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the process-wide HTTP client."""
    return request.app.state.http_client


def get_cache_repository(
    request: Request,
    redis: Annotated[Optional[Redis], Depends(get_redis_client)],
) -> IResourceDownloaderRepository:
    """Return the cache repository for the configured backend.

    The memory backend is a single repository shared by the whole process;
    the Redis backend wraps the shared client in a fresh, stateless adapter.
    """
    if settings.CACHE_BACKEND == "memory":
        return request.app.state.memory_repository
    return RedisDownloaderRepository(redis, key_prefix=settings.DOWNLOADER_KEY_PREFIX)


def get_user_limit_client(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> IUserLimitClient:
    return HttpUserServiceClient(http_client, settings.USER_SERVICE_BASE_URL)


def get_downloader_repository(
    cache: Annotated[IResourceDownloaderRepository, Depends(get_cache_repository)],
    client: Annotated[IUserLimitClient, Depends(get_user_limit_client)],
) -> IResourceDownloaderRepository:
    return CachedExternalDownloaderRepository(cache=cache, client=client)


def get_download_service(
    repository: Annotated[IResourceDownloaderRepository, Depends(get_downloader_repository)],
) -> IDownloadService:
    return DownloadService(repository)


DownloadServiceDep = Annotated[IDownloadService, Depends(get_download_service)]
