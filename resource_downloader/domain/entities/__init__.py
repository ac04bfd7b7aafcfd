"""Export domain entities for use across the application."""

from .resource_downloader import ResourceDownloader

__all__ = ["ResourceDownloader"]
