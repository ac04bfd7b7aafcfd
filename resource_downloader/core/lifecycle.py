"""Application lifecycle management.

This module handles application startup and shutdown events, creating the
shared Redis and HTTP clients (or the in-memory store) and closing them on
shutdown.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from resource_downloader.core.config.settings import settings
from resource_downloader.core.logging import logger
from resource_downloader.infrastructure.redis import create_redis_client
from resource_downloader.infrastructure.repositories.in_memory_downloader_repository import (
    InMemoryDownloaderRepository,
)


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Owns the process-wide clients used by the download dependencies.

        Args:
            app (FastAPI): The FastAPI application instance
        """
        # Startup
        app.state.redis = None
        app.state.memory_repository = None
        if settings.CACHE_BACKEND == "redis":
            app.state.redis = create_redis_client(settings)
        else:
            app.state.memory_repository = InMemoryDownloaderRepository()
        app.state.http_client = httpx.AsyncClient(timeout=settings.USER_SERVICE_TIMEOUT)

        logger.info(
            "application_startup",
            env=settings.APP_ENV,
            version=settings.VERSION,
            cache_backend=settings.CACHE_BACKEND,
        )

        try:
            yield
        finally:
            # Shutdown
            try:
                await app.state.http_client.aclose()
            finally:
                if app.state.redis is not None:
                    await app.state.redis.aclose()
                logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
