"""
Redis Connection Module

This module builds the asynchronous Redis client that stores downloader state.
The client is created once per process by the application lifespan and shared
through `app.state`.

**Security Note**: Ensure that the Redis connection URL (REDIS_URL) uses
`rediss://` when connecting over an untrusted network. Avoid logging the URL,
which may carry the password.
"""

import logging

from redis.asyncio import Redis

from resource_downloader.core.config.settings import Settings

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> Redis:
    """
    Creates an asynchronous Redis client from the application settings.

    Args:
        settings: Application settings providing REDIS_URL.

    Returns:
        Redis: An asynchronous Redis client instance.
    """
    redis = Redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)
    logger.debug("Redis connection created")
    return redis


async def check_redis_health(redis: Redis) -> dict:
    """Ping Redis and report its status."""
    try:
        await redis.ping()
        return {"status": "healthy"}
    except Exception as e:
        logger.error("redis_health_check_failed: %s", e)
        return {"status": "unhealthy", "error": str(e)}
