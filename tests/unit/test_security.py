"""
Unit tests for core.security: password hashing and session tokens.
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from pawfam.core.errors import UnauthorizedError
from pawfam.core.security import TokenIssuer, hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_salted(self):
        """Same password hashes differently each time."""
        assert hash_password("TestPassword123") != hash_password("TestPassword123")

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("TestPassword123")
        assert "TestPassword123" not in hashed

    def test_verify_accepts_correct_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("TestPassword123", hashed) is True

    def test_verify_rejects_wrong_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False


class TestTokenIssuer:
    def test_round_trip_carries_identity_and_role(self):
        issuer = TokenIssuer(secret="s3cret")
        user_id = uuid.uuid4()

        claims = issuer.decode(issuer.issue(user_id, "vendor"))

        assert claims["sub"] == str(user_id)
        assert claims["role"] == "vendor"

    def test_default_lifetime_is_seven_days(self):
        issuer = TokenIssuer(secret="s3cret")
        now = datetime.now(timezone.utc).replace(microsecond=0)

        claims = issuer.decode(issuer.issue(uuid.uuid4(), "customer", now=now))

        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_expired_token_is_rejected(self):
        issuer = TokenIssuer(secret="s3cret")
        issued = datetime.now(timezone.utc) - timedelta(days=8)

        token = issuer.issue(uuid.uuid4(), "customer", now=issued)

        with pytest.raises(UnauthorizedError):
            issuer.decode(token)

    def test_token_from_other_secret_is_rejected(self):
        token = TokenIssuer(secret="one").issue(uuid.uuid4(), "customer")

        with pytest.raises(UnauthorizedError):
            TokenIssuer(secret="two").decode(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(UnauthorizedError):
            TokenIssuer(secret="s3cret").decode("not-a-jwt")
