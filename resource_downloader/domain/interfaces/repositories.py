"""Repository interfaces for abstracting data persistence in the domain layer.

This module defines the abstract base classes (interfaces) for repositories,
which act as a "port" in the context of Hexagonal Architecture. The domain layer
uses these interfaces to interact with persistence mechanisms without being
coupled to any specific technology (e.g., Redis or a process-local dict).

The concrete implementations of these interfaces reside in the `infrastructure`
layer, acting as "adapters". Callers cannot tell a cache from an authoritative
store except by error kind and latency.
"""

from abc import ABC, abstractmethod

from resource_downloader.domain.entities.resource_downloader import ResourceDownloader


class IResourceDownloaderRepository(ABC):
    """An interface defining the contract for downloader persistence operations.

    This repository manages the lifecycle of the `ResourceDownloader`
    aggregate root, keyed by user id.
    """

    @abstractmethod
    async def get(self, user_id: str) -> ResourceDownloader:
        """Retrieves the downloader of a user.

        Args:
            user_id: The identifier of the user.

        Returns:
            The `ResourceDownloader` stored for the user.

        Raises:
            DownloaderNotFoundError: If no downloader exists for the user.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, downloader: ResourceDownloader) -> None:
        """Persists a downloader, replacing any previous state for its user.

        Args:
            downloader: The `ResourceDownloader` entity to persist.

        Raises:
            StorageError: If the backend fails to store the entity.
        """
        raise NotImplementedError
