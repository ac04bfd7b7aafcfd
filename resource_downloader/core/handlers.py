from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into appropriate HTTP responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from resource_downloader.core.exceptions import (
    DownloaderNotFoundError,
    ExternalServiceError,
    LimitReachedError,
    ResourceDownloaderError,
    StorageError,
    UserLimitNotFoundError,
)

__all__ = [
    "limit_reached_error_handler",
    "not_found_error_handler",
    "external_service_error_handler",
    "storage_error_handler",
    "resource_downloader_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _error_response(status_code: int, exc: ResourceDownloaderError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "code": exc.code},
    )


async def limit_reached_error_handler(request: Request, exc: LimitReachedError) -> JSONResponse:
    """Handles `LimitReachedError`, returning a `429 Too Many Requests`."""
    logger.info("Download limit reached", error=exc.code, path=request.url.path)
    return _error_response(status.HTTP_429_TOO_MANY_REQUESTS, exc)


async def not_found_error_handler(
    request: Request, exc: DownloaderNotFoundError | UserLimitNotFoundError
) -> JSONResponse:
    """Handles missing downloaders and users unknown to the limit service, returning a `404`."""
    logger.warning("Resource not found", error=exc.code, path=request.url.path)
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


async def external_service_error_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    """Handles `ExternalServiceError`, returning a `502 Bad Gateway`.

    Raised when the user-limit service cannot be reached or answers with an
    unexpected status or payload.
    """
    logger.error("User limit service failure", error=exc.code, detail=str(exc), path=request.url.path)
    return _error_response(status.HTTP_502_BAD_GATEWAY, exc)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Handles `StorageError`, returning a `503 Service Unavailable`.

    A download that fails here was not confirmed and may be retried by the
    client.
    """
    logger.error("Downloader storage failure", error=exc.code, detail=str(exc), path=request.url.path)
    return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc)


async def resource_downloader_error_handler(request: Request, exc: ResourceDownloaderError) -> JSONResponse:
    """Fallback for any other application error, returning a `500`."""
    logger.error("Unhandled application error", error=exc.code, detail=str(exc), path=request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception MRO, so the more specific
    `UserLimitNotFoundError` wins over `ExternalServiceError`.
    """
    app.add_exception_handler(LimitReachedError, limit_reached_error_handler)
    app.add_exception_handler(DownloaderNotFoundError, not_found_error_handler)
    app.add_exception_handler(UserLimitNotFoundError, not_found_error_handler)
    app.add_exception_handler(ExternalServiceError, external_service_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(ResourceDownloaderError, resource_downloader_error_handler)
