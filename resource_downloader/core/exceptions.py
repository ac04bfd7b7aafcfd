from __future__ import annotations

"""Centralized, structured exception hierarchy for the resource downloader.

Every error raised by the domain, the repositories and the external limit
client derives from `ResourceDownloaderError`. Each exception carries a
machine-readable `code` for programmatic handling and a human-readable
`message` for logging and API responses.

The hierarchy is designed to:
- Keep the error taxonomy small: not found, limit reached, external service
  failure and storage failure.
- Map cleanly to HTTP status codes in the API layer.
- Offer a consistent structure for structured logging.
"""

from typing import Final

__all__: Final = [
    "ResourceDownloaderError",
    "DownloaderNotFoundError",
    "LimitReachedError",
    "ExternalServiceError",
    "UserLimitNotFoundError",
    "StorageError",
]


class ResourceDownloaderError(Exception):
    """Base exception class for all custom errors in the application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code for identifying
                    the type of error programmatically.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    # A concise, structured representation used by loggers & FastAPI handlers.
    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------


class LimitReachedError(ResourceDownloaderError):
    """Raised when registering a download would exceed the user's limit.

    The entity is left untouched when this is raised. It maps to a
    `429 Too Many Requests` HTTP status.
    """

    def __init__(self, message: str = "Download limit reached", code: str = "download_limit_reached"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Persistence errors
# ---------------------------------------------------------------------------


class DownloaderNotFoundError(ResourceDownloaderError):
    """Raised when a store holds no downloader for the requested user.

    Maps to a `404 Not Found` HTTP status code.
    """

    def __init__(self, message: str = "Downloader not found", code: str = "downloader_not_found"):
        super().__init__(message, code)


class StorageError(ResourceDownloaderError):
    """Raised for cache or storage failures other than a missing entry.

    Wraps driver errors (connection loss, undecodable payloads) so that the
    domain never sees backend-specific exceptions. Maps to a
    `503 Service Unavailable` HTTP status.
    """

    def __init__(self, message: str = "Storage operation failed", code: str = "storage_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# External service errors
# ---------------------------------------------------------------------------


class ExternalServiceError(ResourceDownloaderError):
    """Raised when the user-limit service is unreachable or answers with an error.

    Maps to a `502 Bad Gateway` HTTP status.
    """

    def __init__(self, message: str = "User limit service failure", code: str = "external_service_error"):
        super().__init__(message, code)


class UserLimitNotFoundError(ExternalServiceError):
    """Raised when the user-limit service does not know the requested user.

    Maps to a `404 Not Found` HTTP status.
    """

    def __init__(self, message: str = "User not found in limit service", code: str = "user_limit_not_found"):
        super().__init__(message, code)
