"""User limit value object.

Immutable representation of the answer given by the external user-limit
service. It is never persisted; it is only used to build a fresh
`ResourceDownloader` on a cache miss.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserLimit(BaseModel):
    """Download limit issued for a user by the external service.

    Attributes:
        user_id: Identifier of the user the limit applies to.
        limit: Maximum number of downloads the user may register.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    user_id: str = Field(min_length=1)
    limit: int = Field(ge=0)
