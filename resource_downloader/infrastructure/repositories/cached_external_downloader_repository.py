"""Cache-aside downloader repository.

The user-limit service only knows limits, never download history. This
repository therefore reads through a cache to the external service when a user
is seen for the first time, and from then on treats the cache as the store of
record for the user's downloads.

Read path:
    cache hit  -> return the cached downloader, no external call
    cache miss -> fetch the limit, build an empty downloader, try to cache it

Write path:
    always the cache; failures propagate because no other copy exists.
"""

from structlog import get_logger

from resource_downloader.core.exceptions import DownloaderNotFoundError
from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.interfaces.repositories import IResourceDownloaderRepository
from resource_downloader.domain.interfaces.services import IUserLimitClient

logger = get_logger(__name__)


class CachedExternalDownloaderRepository(IResourceDownloaderRepository):
    """Decorates a cache repository with limits fetched from the user service.

    Both collaborators are injected and their lifecycles stay with the caller.
    """

    def __init__(self, cache: IResourceDownloaderRepository, client: IUserLimitClient):
        """Initialize the repository.

        Args:
            cache: Repository used as the cache and store of download state
            client: Client fetching user limits on a cache miss
        """
        self._cache = cache
        self._client = client

    async def get(self, user_id: str) -> ResourceDownloader:
        """Load the downloader of `user_id`, creating it on first access.

        Any cache failure counts as a miss. A failure of the limit service is
        propagated unchanged and no default limit is assumed.

        Raises:
            ExternalServiceError: If the limit cannot be fetched on a miss
        """
        try:
            return await self._cache.get(user_id)
        except DownloaderNotFoundError:
            logger.debug("Downloader cache miss", user_id=user_id)
        except Exception as e:
            logger.warning(
                "Downloader cache read failed, treating as miss",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )

        user_limit = await self._client.fetch_limit(user_id)
        downloader = ResourceDownloader.new(user_id, user_limit.limit)

        # Best effort: a lost write is rebuilt from the limit service next time.
        try:
            await self._cache.save(downloader)
        except Exception as e:
            logger.warning(
                "Failed to cache new downloader",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )

        logger.info("Downloader created from user limit", user_id=user_id, limit=user_limit.limit)
        return downloader

    async def save(self, downloader: ResourceDownloader) -> None:
        """Write the downloader through to the cache.

        Raises:
            StorageError: If the cache write fails
        """
        await self._cache.save(downloader)
