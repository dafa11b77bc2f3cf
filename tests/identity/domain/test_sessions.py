"""Tests for password hashing and bearer tokens."""

from datetime import timedelta

import pytest
from sokobo.access.gate import AuthenticationError
from sokobo.config import Settings
from sokobo.identity.sessions import decode_token, hash_password, issue_token, verify_password
from sokobo.identity.user import User


@pytest.fixture()
def settings():
    return Settings(jwt_secret="test-secret", seed_demo_data=False)


@pytest.fixture()
def user():
    return User(name="Lerato", email="lerato@example.com", password=hash_password("s3cret!"))


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        assert hash_password("s3cret!") != "s3cret!"

    def test_verify(self, user):
        assert verify_password("s3cret!", user.password)
        assert not verify_password("wrong", user.password)


class TestTokens:
    def test_round_trip_claims(self, user, settings):
        payload = decode_token(issue_token(user, settings), settings)

        assert payload["sub"] == user.id
        assert payload["role"] == "customer"

    def test_expired_token_rejected(self, user, settings):
        token = issue_token(user, settings, expires_delta=timedelta(seconds=-10))
        with pytest.raises(AuthenticationError):
            decode_token(token, settings)

    def test_token_signed_with_other_secret_rejected(self, user, settings):
        token = issue_token(user, Settings(jwt_secret="other-secret", seed_demo_data=False))
        with pytest.raises(AuthenticationError):
            decode_token(token, settings)

    def test_garbage_rejected(self, settings):
        with pytest.raises(AuthenticationError):
            decode_token("not-a-token", settings)
