"""
Application-specific settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, logging and the
    cache backend used by the downloader repository.

    Performance Note:
        - CACHE_BACKEND=memory keeps downloader state in the process only and is
          meant for local development and tests; state is lost on restart.
    """
    PROJECT_NAME: str = "resource-downloader"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    CACHE_BACKEND: str = Field(default="redis", pattern="^(redis|memory)$")
