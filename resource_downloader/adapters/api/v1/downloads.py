"""Download routes.

Thin HTTP endpoints delegating to the download service. Domain errors are
translated to responses by the global exception handlers.
"""

from fastapi import APIRouter, status
from structlog import get_logger

from resource_downloader.adapters.api.v1.schemas import DownloaderResponse, DownloadResponse
from resource_downloader.infrastructure.dependency_injection.download_dependencies import (
    DownloadServiceDep,
)

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "/users/{user_id}/downloads/{resource_id}",
    response_model=DownloadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a download",
    responses={
        201: {"description": "Download permitted and recorded"},
        404: {"description": "User unknown to the limit service"},
        429: {"description": "Download limit reached"},
        502: {"description": "User limit service failure"},
        503: {"description": "Download state could not be stored"},
    },
)
async def download_resource(
    user_id: str,
    resource_id: str,
    download_service: DownloadServiceDep,
) -> DownloadResponse:
    downloader = await download_service.download_resource(user_id, resource_id)
    return DownloadResponse.from_downloader(downloader, resource_id)


@router.get(
    "/users/{user_id}/downloads",
    response_model=DownloaderResponse,
    summary="List downloads of a user",
)
async def get_downloads(user_id: str, download_service: DownloadServiceDep) -> DownloaderResponse:
    downloader = await download_service.get_downloads(user_id)
    return DownloaderResponse.from_downloader(downloader)
