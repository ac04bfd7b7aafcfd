import pytest
from pydantic import ValidationError

from resource_downloader.domain.value_objects.user_limit import UserLimit


@pytest.mark.unit
def test_user_limit_parses_service_payload():
    user_limit = UserLimit.model_validate_json('{"user_id": "u1", "limit": 10, "plan": "pro"}')

    assert user_limit.user_id == "u1"
    assert user_limit.limit == 10


@pytest.mark.unit
def test_user_limit_is_immutable():
    user_limit = UserLimit(user_id="u1", limit=10)

    with pytest.raises(ValidationError):
        user_limit.limit = 11


@pytest.mark.unit
@pytest.mark.parametrize("payload", ['{"user_id": "u1"}', '{"user_id": "u1", "limit": -1}', '{"limit": 3}'])
def test_user_limit_rejects_invalid_payload(payload):
    with pytest.raises(ValidationError):
        UserLimit.model_validate_json(payload)
