"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from sesame_auth.services import JWTService

TEST_SECRET = "test-secret-key-12345678901234567890"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestAccessTokens:
    """Tests for access token signing."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=TEST_SECRET, access_token_expire_hours=2)
        self.user_id = uuid4()
        self.email = "test@example.com"

    def decode(self, token: str) -> dict:
        return jwt.decode(token, TEST_SECRET, algorithms=[JWTService.ALGORITHM])

    def test_token_carries_user_claims(self):
        """Test that the token identifies the user."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        claims = self.decode(token)

        assert claims["sub"] == str(self.user_id)
        assert claims["email"] == self.email

    def test_token_uses_configured_lifetime(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        claims = self.decode(token)

        assert claims["exp"] - claims["iat"] == int(timedelta(hours=2).total_seconds())

    def test_custom_expiry_overrides_lifetime(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            expires_delta=timedelta(minutes=5),
        )

        exp = datetime.fromtimestamp(self.decode(token)["exp"], tz=timezone.utc)

        assert exp <= datetime.now(tz=timezone.utc) + timedelta(minutes=5)

    def test_token_is_signed_with_secret(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(
                token,
                "another-secret-key-12345678901234567",
                algorithms=[JWTService.ALGORITHM],
            )
