import pytest
from pydantic import ValidationError

from resource_downloader.core.config.settings import Settings


pytestmark = pytest.mark.unit


def test_redis_url_is_assembled_from_parts(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)

    settings = Settings(
        _env_file=None,
        REDIS_HOST="cache.internal",
        REDIS_PORT=6380,
        REDIS_DB=2,
        REDIS_PASSWORD="s3cret",
    )

    assert settings.REDIS_URL == "redis://:s3cret@cache.internal:6380/2"


def test_redis_url_uses_tls_scheme(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)

    settings = Settings(_env_file=None, REDIS_HOST="cache.internal", REDIS_SSL=True)

    assert settings.REDIS_URL.startswith("rediss://cache.internal:6379")


def test_explicit_redis_url_wins():
    settings = Settings(_env_file=None, REDIS_URL="redis://other:1234/0")

    assert settings.REDIS_URL == "redis://other:1234/0"


def test_production_requires_redis_password(monkeypatch):
    monkeypatch.delenv("REDIS_PASSWORD", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None, APP_ENV="production")


def test_invalid_cache_backend_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, CACHE_BACKEND="memcached")


def test_user_service_base_url_is_normalized():
    settings = Settings(_env_file=None, USER_SERVICE_BASE_URL="http://users.test/")

    assert settings.USER_SERVICE_BASE_URL == "http://users.test"
