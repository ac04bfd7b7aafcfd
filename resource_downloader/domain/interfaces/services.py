"""Service interfaces for the download domain.

These ports describe the collaborators the domain relies on (the external
user-limit service) and the application service exposed to the API layer.
"""

from abc import ABC, abstractmethod

from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.value_objects.user_limit import UserLimit


class IUserLimitClient(ABC):
    """Interface for fetching the download limit issued for a user."""

    @abstractmethod
    async def fetch_limit(self, user_id: str) -> UserLimit:
        """Fetches the limit of a user from the external service.

        Args:
            user_id: The identifier of the user.

        Returns:
            The `UserLimit` reported by the service.

        Raises:
            UserLimitNotFoundError: If the service does not know the user.
            ExternalServiceError: If the service is unreachable or misbehaves.
        """
        raise NotImplementedError


class IDownloadService(ABC):
    """Interface for the download application service."""

    @abstractmethod
    async def download_resource(self, user_id: str, resource_id: str) -> ResourceDownloader:
        """Registers a download of `resource_id` by `user_id`.

        Returns:
            The downloader after the download has been recorded.

        Raises:
            LimitReachedError: If the user already reached their limit.
            DownloaderNotFoundError, ExternalServiceError, StorageError:
                Propagated from the repository.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_downloads(self, user_id: str) -> ResourceDownloader:
        """Returns the current downloader state of a user."""
        raise NotImplementedError
