"""Redis downloader repository.

This module stores `ResourceDownloader` aggregates in Redis as JSON strings
under `downloader:<user_id>` keys. Keys are written without a TTL, so the
cache doubles as the durable store of download history.
"""

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError
from structlog import get_logger

from resource_downloader.core.exceptions import DownloaderNotFoundError, StorageError
from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.interfaces.repositories import IResourceDownloaderRepository

logger = get_logger(__name__)

DEFAULT_KEY_PREFIX = "downloader:"


class RedisDownloaderRepository(IResourceDownloaderRepository):
    """Redis implementation of the downloader repository.

    Driver failures and corrupt payloads are wrapped in `StorageError`; a
    missing key raises `DownloaderNotFoundError`.
    """

    def __init__(self, redis_client: Redis, key_prefix: str = DEFAULT_KEY_PREFIX):
        """Initialize the repository.

        Args:
            redis_client: The async Redis client instance. Its lifecycle is
                owned by the caller.
            key_prefix: Prefix prepended to the user id to build Redis keys.
        """
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _key(self, user_id: str) -> str:
        return f"{self.key_prefix}{user_id}"

    async def get(self, user_id: str) -> ResourceDownloader:
        key = self._key(user_id)
        try:
            payload = await self.redis.get(key)
        except RedisError as e:
            logger.error(
                "Error reading downloader from Redis",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StorageError(f"Failed to read downloader for user {user_id}") from e

        if payload is None:
            raise DownloaderNotFoundError(f"Downloader not found for user {user_id}")

        try:
            return ResourceDownloader.from_json(payload)
        except ValidationError as e:
            logger.error("Corrupt downloader payload in Redis", user_id=user_id, key=key)
            raise StorageError(f"Stored downloader for user {user_id} is corrupt") from e

    async def save(self, downloader: ResourceDownloader) -> None:
        try:
            await self.redis.set(self._key(downloader.user_id), downloader.to_json())
        except RedisError as e:
            logger.error(
                "Error writing downloader to Redis",
                user_id=downloader.user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StorageError(f"Failed to save downloader for user {downloader.user_id}") from e
