"""
External user-limit service settings.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class UserServiceSettings(BaseSettings):
    """
    Defines how the application reaches the service that issues per-user
    download limits.

    Performance Note:
        - USER_SERVICE_TIMEOUT bounds a single limit lookup. It is only paid on
          a cache miss, so it can be generous without slowing regular downloads.
    """
    USER_SERVICE_BASE_URL: str = "http://localhost"
    USER_SERVICE_TIMEOUT: float = Field(gt=0, default=5.0)

    @field_validator("USER_SERVICE_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
