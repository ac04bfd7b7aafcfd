"""Tests for the download endpoints.

The download service is replaced with a mock so that only HTTP concerns
(status codes, payloads, error mapping) are exercised here.
"""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from resource_downloader.core.application import create_application
from resource_downloader.core.exceptions import (
    DownloaderNotFoundError,
    ExternalServiceError,
    LimitReachedError,
    StorageError,
    UserLimitNotFoundError,
)
from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.interfaces.services import IDownloadService
from resource_downloader.infrastructure.dependency_injection.download_dependencies import (
    get_download_service,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def mock_download_service():
    return AsyncMock(spec=IDownloadService)


@pytest_asyncio.fixture
async def async_client(mock_download_service):
    app = create_application()
    app.dependency_overrides[get_download_service] = lambda: mock_download_service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_download_resource_created(async_client, mock_download_service):
    mock_download_service.download_resource.return_value = ResourceDownloader(
        user_id="u1", resources=["a", "b"], limit=5
    )

    response = await async_client.post("/api/v1/users/u1/downloads/b")

    assert response.status_code == 201
    assert response.json() == {
        "user_id": "u1",
        "resource_id": "b",
        "downloads": 2,
        "limit": 5,
        "remaining": 3,
    }
    mock_download_service.download_resource.assert_awaited_once_with("u1", "b")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error,status_code,code",
    [
        (LimitReachedError(), 429, "download_limit_reached"),
        (DownloaderNotFoundError(), 404, "downloader_not_found"),
        (UserLimitNotFoundError(), 404, "user_limit_not_found"),
        (ExternalServiceError(), 502, "external_service_error"),
        (StorageError(), 503, "storage_error"),
    ],
)
async def test_download_resource_error_mapping(async_client, mock_download_service, error, status_code, code):
    mock_download_service.download_resource.side_effect = error

    response = await async_client.post("/api/v1/users/u1/downloads/a")

    assert response.status_code == status_code
    assert response.json() == {"detail": error.message, "code": code}


@pytest.mark.asyncio
async def test_get_downloads(async_client, mock_download_service):
    mock_download_service.get_downloads.return_value = ResourceDownloader(
        user_id="u1", resources=["a"], limit=2
    )

    response = await async_client.get("/api/v1/users/u1/downloads")

    assert response.status_code == 200
    assert response.json() == {"user_id": "u1", "resources": ["a"], "limit": 2, "remaining": 1}
    mock_download_service.get_downloads.assert_awaited_once_with("u1")
