"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from greenbite_identity import InvalidTokenError, JWTService

SECRET = "unit-test-secret"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET, expire_days=7)


def test_round_trip_carries_user_id(service):
    user_id = uuid4()

    payload = service.verify_token(service.create_token(user_id))

    assert payload.user_id == user_id


def test_token_expires_after_configured_days(service):
    payload = service.verify_token(service.create_token(uuid4()))

    assert payload.exp - payload.issued_at == timedelta(days=7)
    assert service.expires_in_seconds == 7 * 24 * 60 * 60


def test_expired_token_is_rejected(service):
    token = service.create_token(uuid4(), expires_delta=timedelta(seconds=-1))

    with pytest.raises(InvalidTokenError, match="expired"):
        service.verify_token(token)


def test_token_signed_with_other_key_is_rejected(service):
    token = JWTService(secret_key="another-secret").create_token(uuid4())

    with pytest.raises(InvalidTokenError):
        service.verify_token(token)


def test_garbage_is_rejected(service):
    with pytest.raises(InvalidTokenError):
        service.verify_token("not.a.token")


def test_non_uuid_subject_is_rejected(service):
    token = jwt.encode(
        {"sub": "42", "iat": 0, "exp": 4102444800},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError, match="Malformed"):
        service.verify_token(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        JWTService(secret_key="")
