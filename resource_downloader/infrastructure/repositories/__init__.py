"""Infrastructure implementations of the downloader repository."""

from .cached_external_downloader_repository import CachedExternalDownloaderRepository
from .in_memory_downloader_repository import InMemoryDownloaderRepository
from .redis_downloader_repository import RedisDownloaderRepository

__all__ = [
    "CachedExternalDownloaderRepository",
    "InMemoryDownloaderRepository",
    "RedisDownloaderRepository",
]
