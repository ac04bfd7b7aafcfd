"""Response schemas for the download API."""

from typing import Dict, List

from pydantic import BaseModel, Field

from resource_downloader.domain.entities.resource_downloader import ResourceDownloader


class DownloadResponse(BaseModel):
    """Outcome of a registered download."""

    user_id: str = Field(description="User that downloaded the resource.")
    resource_id: str = Field(description="Resource that was downloaded.")
    downloads: int = Field(description="Number of downloads registered so far.")
    limit: int = Field(description="Maximum number of downloads for the user.")
    remaining: int = Field(description="Downloads left before the limit is reached.")

    @classmethod
    def from_downloader(cls, downloader: ResourceDownloader, resource_id: str) -> "DownloadResponse":
        return cls(
            user_id=downloader.user_id,
            resource_id=resource_id,
            downloads=len(downloader.resources),
            limit=downloader.limit,
            remaining=downloader.remaining,
        )


class DownloaderResponse(BaseModel):
    """Current download state of a user."""

    user_id: str
    resources: List[str]
    limit: int
    remaining: int

    @classmethod
    def from_downloader(cls, downloader: ResourceDownloader) -> "DownloaderResponse":
        return cls(
            user_id=downloader.user_id,
            resources=list(downloader.resources),
            limit=downloader.limit,
            remaining=downloader.remaining,
        )


class HealthResponse(BaseModel):
    status: str
    env: str
    services: Dict[str, Dict[str, str]]
