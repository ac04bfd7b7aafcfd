"""Download Domain Service.

This service decides whether a user may download a resource and records the
download. It depends only on the repository port, never on a concrete backend.
"""

import structlog

from resource_downloader.core.exceptions import LimitReachedError
from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.interfaces.repositories import IResourceDownloaderRepository
from resource_downloader.domain.interfaces.services import IDownloadService

logger = structlog.get_logger(__name__)


class DownloadService(IDownloadService):
    """Application service orchestrating a single download registration.

    Each call runs one get-mutate-save sequence without locking. Errors from
    the repository and the entity are propagated untranslated; the caller
    decides whether to retry.
    """

    def __init__(self, downloader_repository: IResourceDownloaderRepository):
        """Initialize the service with its repository.

        Args:
            downloader_repository: Repository holding per-user downloaders
        """
        self._downloader_repository = downloader_repository

    async def download_resource(self, user_id: str, resource_id: str) -> ResourceDownloader:
        """Register a download of `resource_id` for `user_id`.

        Args:
            user_id: Identifier of the downloading user
            resource_id: Identifier of the requested resource

        Returns:
            ResourceDownloader: The downloader after the registration

        Raises:
            LimitReachedError: If the user is at capacity; nothing is saved
            DownloaderNotFoundError: If no downloader can be loaded
            ExternalServiceError: If the limit service fails on a cache miss
            StorageError: If the updated downloader cannot be persisted; the
                download must then be treated as not confirmed
        """
        downloader = await self._downloader_repository.get(user_id)

        try:
            downloader.register_download(resource_id)
        except LimitReachedError:
            logger.info(
                "Download rejected, limit reached",
                user_id=user_id,
                resource_id=resource_id,
                limit=downloader.limit,
            )
            raise

        # The resource transfer itself happens outside this service.

        await self._downloader_repository.save(downloader)

        logger.info(
            "Download registered",
            user_id=user_id,
            resource_id=resource_id,
            downloads=len(downloader.resources),
            remaining=downloader.remaining,
        )
        return downloader

    async def get_downloads(self, user_id: str) -> ResourceDownloader:
        """Return the downloader of `user_id` without modifying it."""
        return await self._downloader_repository.get(user_id)
