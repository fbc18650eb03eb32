"""Tests for registration, login and session tokens"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from license_tracker.domain.errors import (
    AlreadyExistsError, AuthenticationError, InvalidCredentialsError, UserNotFoundError
)
from license_tracker.utils.jwt import JWTService
from license_tracker.utils.passwords import hash_password, verify_password


def test_password_hash_is_one_way():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert hashed.startswith("$2")
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_rejects_non_bcrypt_value():
    assert not verify_password("s3cret", "plain-text")


class TestAuthService:

    def test_register_then_login(self, auth_service, test_settings):
        auth_service.register("ravi", "Ravi@Example.com", "s3cret")

        token, user = auth_service.login("ravi@example.com", "s3cret")

        assert user.username == "ravi"
        claims = jwt.decode(token, test_settings.jwt_secret, algorithms=["HS256"])
        assert claims["id"] == user.user_id
        assert claims["username"] == "ravi"
        assert claims["exp"] - claims["iat"] == 60 * 60

    def test_password_is_not_stored_in_clear(self, auth_service):
        user = auth_service.register("ravi", "ravi@example.com", "s3cret")
        assert user.password_hash != "s3cret"

    def test_duplicate_email(self, auth_service):
        auth_service.register("ravi", "ravi@example.com", "s3cret")
        with pytest.raises(AlreadyExistsError):
            auth_service.register("ravi2", "RAVI@example.com", "other")

    def test_unknown_login(self, auth_service):
        with pytest.raises(UserNotFoundError) as exc_info:
            auth_service.login("nobody@example.com", "x")
        assert exc_info.value.http_status == 400

    def test_wrong_password(self, auth_service):
        auth_service.register("ravi", "ravi@example.com", "s3cret")
        with pytest.raises(InvalidCredentialsError):
            auth_service.login("ravi@example.com", "nope")


class TestJWTService:

    def test_actor_context_from_bearer_header(self, auth_service, jwt_service):
        auth_service.register("ravi", "ravi@example.com", "s3cret")
        token, user = auth_service.login("ravi@example.com", "s3cret")

        actor = jwt_service.get_actor_context(f"Bearer {token}")
        assert actor.user_id == user.user_id
        assert actor.username == "ravi"

    def test_expired_token(self, auth_service, test_settings):
        user = auth_service.register("ravi", "ravi@example.com", "s3cret")
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = JWTService(test_settings, clock=lambda: past).issue_token(user)

        with pytest.raises(AuthenticationError) as exc_info:
            JWTService(test_settings).validate_token(token)
        assert exc_info.value.message == "Token has expired"

    def test_wrong_signature(self, auth_service, test_settings):
        user = auth_service.register("ravi", "ravi@example.com", "s3cret")
        other = test_settings.model_copy(update={"jwt_secret": "another-secret-key-for-license-tracker-02"})
        token = JWTService(other).issue_token(user)

        with pytest.raises(AuthenticationError):
            JWTService(test_settings).validate_token(token)

    def test_missing_token(self, jwt_service):
        with pytest.raises(AuthenticationError):
            jwt_service.validate_token("")
