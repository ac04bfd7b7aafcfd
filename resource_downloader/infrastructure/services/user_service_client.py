"""HTTP client for the external user-limit service.

The service exposes `GET /users/{user_id}` returning `{"user_id", "limit"}`.
Every failure mode is translated into the `ExternalServiceError` family so the
repository layer never deals with httpx exceptions.
"""

from urllib.parse import quote

import httpx
from pydantic import ValidationError
from structlog import get_logger

from resource_downloader.core.exceptions import ExternalServiceError, UserLimitNotFoundError
from resource_downloader.domain.interfaces.services import IUserLimitClient
from resource_downloader.domain.value_objects.user_limit import UserLimit

logger = get_logger(__name__)


def _path_segment(user_id: str) -> str:
    """Percent-encode a user id into a single URL path segment.

    Reserved characters such as `/`, `?` and `#` are escaped, and the dot
    segments `.` and `..` are encoded so URL normalization cannot collapse them.
    """
    segment = quote(user_id, safe="")
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return segment


class HttpUserServiceClient(IUserLimitClient):
    """Fetches user limits over HTTP using an injected `httpx.AsyncClient`.

    The client does not retry; timeouts come from the injected httpx client.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        """Initialize the client.

        Args:
            http_client: Shared async HTTP client owned by the composition root.
            base_url: Base URL of the user-limit service, without trailing slash.
        """
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")

    async def fetch_limit(self, user_id: str) -> UserLimit:
        if not user_id:
            raise UserLimitNotFoundError("An empty user id has no limit")

        url = f"{self._base_url}/users/{_path_segment(user_id)}"

        try:
            response = await self._http_client.get(url)
        except httpx.HTTPError as e:
            logger.error(
                "User limit service unreachable",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ExternalServiceError(f"Failed to reach user limit service for user {user_id}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning("User unknown to limit service", user_id=user_id)
            raise UserLimitNotFoundError(f"User {user_id} not found in limit service")

        if response.status_code != httpx.codes.OK:
            logger.error(
                "User limit service returned an error",
                user_id=user_id,
                status_code=response.status_code,
            )
            raise ExternalServiceError(
                f"Failed to get limit for user {user_id}: status {response.status_code}"
            )

        try:
            user_limit = UserLimit.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Invalid user limit payload", user_id=user_id, error=str(e))
            raise ExternalServiceError(f"Invalid limit payload for user {user_id}") from e

        if user_limit.user_id != user_id:
            logger.error(
                "User limit payload is for another user",
                user_id=user_id,
                payload_user_id=user_limit.user_id,
            )
            raise ExternalServiceError(f"Limit service answered for another user than {user_id}")

        logger.debug("User limit fetched", user_id=user_id, limit=user_limit.limit)
        return user_limit
