"""Domain interfaces (ports) for repositories and external services."""

from .repositories import IResourceDownloaderRepository
from .services import IDownloadService, IUserLimitClient

__all__ = [
    "IResourceDownloaderRepository",
    "IDownloadService",
    "IUserLimitClient",
]
