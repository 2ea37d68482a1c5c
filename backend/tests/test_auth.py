from datetime import datetime, timedelta, timezone

import pytest

from api_scaffold.services.auth import TokenService
from api_scaffold.services.errors import ServiceUnavailableError, UnauthorizedError
from api_scaffold.settings import Settings


def test_issued_token_round_trips_subject() -> None:
    tokens = TokenService.from_settings(Settings(jwt_secret="secret"))

    assert tokens.verify(tokens.issue("user-1")) == "user-1"


def test_token_signed_with_other_secret_is_invalid() -> None:
    token = TokenService("one").issue("user-1")

    with pytest.raises(UnauthorizedError) as excinfo:
        TokenService("two").verify(token)

    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Invalid token"


def test_expired_token_is_invalid() -> None:
    tokens = TokenService("secret", expires_minutes=1)
    token = tokens.issue("user-1", now=datetime.now(timezone.utc) - timedelta(hours=1))

    with pytest.raises(UnauthorizedError):
        tokens.verify(token)


def test_garbage_token_is_invalid() -> None:
    with pytest.raises(UnauthorizedError):
        TokenService("secret").verify("not-a-jwt")


def test_missing_secret_means_auth_is_unavailable() -> None:
    tokens = TokenService("")

    with pytest.raises(ServiceUnavailableError):
        tokens.issue("user-1")
    with pytest.raises(ServiceUnavailableError):
        tokens.verify("anything")
