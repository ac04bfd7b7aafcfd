"""Resource downloader aggregate.

`ResourceDownloader` is the single aggregate root of the domain: one instance
per user, holding the ordered list of resources the user has downloaded and
the limit issued for that user by the external user-limit service.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator

from resource_downloader.core.exceptions import LimitReachedError


class ResourceDownloader(BaseModel):
    """Tracks the downloads of one user and enforces their download limit.

    Business Rules:
    - `len(resources) <= limit` holds after every mutation.
    - A registration that would break the rule is rejected without touching
      `resources`.
    - Repeated resource ids are not deduplicated; each registration counts.
    - `user_id` and `limit` never change once the downloader exists.

    Attributes:
        user_id: Opaque identifier of the owning user.
        resources: Downloaded resource ids in download order.
        limit: Maximum number of registered downloads.
    """

    user_id: str = Field(min_length=1, frozen=True)
    resources: List[str] = Field(default_factory=list)
    limit: int = Field(ge=0, frozen=True)

    @model_validator(mode="after")
    def check_within_limit(self) -> "ResourceDownloader":
        if len(self.resources) > self.limit:
            raise ValueError(
                f"{len(self.resources)} resources exceed the limit of {self.limit}"
            )
        return self

    @classmethod
    def new(cls, user_id: str, limit: int) -> "ResourceDownloader":
        """Create a downloader with no downloads yet."""
        return cls(user_id=user_id, resources=[], limit=limit)

    @property
    def remaining(self) -> int:
        return self.limit - len(self.resources)

    def is_limit_reached(self) -> bool:
        return len(self.resources) >= self.limit

    def register_download(self, resource_id: str) -> None:
        """Record a download of `resource_id`.

        Args:
            resource_id: Identifier of the downloaded resource.

        Raises:
            LimitReachedError: If the user already used the whole limit. The
                resource list is left unchanged.
        """
        if self.is_limit_reached():
            raise LimitReachedError(
                f"Download limit of {self.limit} reached for user {self.user_id}"
            )
        self.resources.append(resource_id)

    def to_json(self) -> str:
        """Serialize to the flat `{user_id, resources, limit}` cache payload."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str | bytes) -> "ResourceDownloader":
        """Rebuild a downloader from a payload produced by `to_json`.

        Raises:
            pydantic.ValidationError: If the payload is malformed.
        """
        return cls.model_validate_json(payload)
