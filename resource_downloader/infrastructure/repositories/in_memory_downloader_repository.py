"""In-memory downloader repository.

Process-local implementation of `IResourceDownloaderRepository`. It backs the
`memory` cache backend and serves as a fast fake in tests.
"""

from typing import Dict

from structlog import get_logger

from resource_downloader.core.exceptions import DownloaderNotFoundError
from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.interfaces.repositories import IResourceDownloaderRepository

logger = get_logger(__name__)


class InMemoryDownloaderRepository(IResourceDownloaderRepository):
    """Dict-backed repository storing downloaders by user id.

    Entities are copied on the way in and on the way out, so a caller mutating
    a loaded downloader does not change the stored state until it saves.
    """

    def __init__(self) -> None:
        self.storage: Dict[str, ResourceDownloader] = {}

    async def get(self, user_id: str) -> ResourceDownloader:
        downloader = self.storage.get(user_id)
        if downloader is None:
            logger.debug("Downloader not found in memory", user_id=user_id)
            raise DownloaderNotFoundError(f"Downloader not found for user {user_id}")
        return downloader.model_copy(deep=True)

    async def save(self, downloader: ResourceDownloader) -> None:
        self.storage[downloader.user_id] = downloader.model_copy(deep=True)
