"""
Unit tests for users_api.core.security
"""
import time

import jwt
import pytest
from users_api.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_bcrypt_string(self):
        result = hash_password("123123123")
        assert isinstance(result, str)
        assert result.startswith("$2")

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same-password")
        h2 = hash_password("same-password")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_uses_configured_rounds(self, mock_settings):
        mock_settings.bcrypt_rounds = 5
        assert hash_password("123123123").startswith("$2b$05$")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct-password")
        assert verify_password("correct-password", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct-password")
        assert verify_password("wrong-password", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("123123123", "not-a-bcrypt-hash") is False

    def test_missing_hash_returns_false(self):
        assert verify_password("123123123", "") is False


class TestAccessToken:
    """Tests for create_access_token and decode_access_token"""

    def test_token_carries_user_id(self, mock_settings):
        token = create_access_token("abcd1234abcd1234abcd1234")
        assert decode_access_token(token) == "abcd1234abcd1234abcd1234"

    def test_token_expires_after_configured_minutes(self, mock_settings):
        token = create_access_token("abcd1234abcd1234abcd1234")
        claims = jwt.decode(token, "test_jwt_secret", algorithms=["HS256"])
        assert claims["sub"] == "abcd1234abcd1234abcd1234"
        assert claims["exp"] - claims["iat"] == 1440 * 60

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(ValueError) as exc_info:
            decode_access_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_decode_with_other_secret_raises(self, mock_settings):
        token = create_access_token("abcd1234abcd1234abcd1234")
        mock_settings.jwt_secret_key = "another_secret"
        with pytest.raises(ValueError):
            decode_access_token(token)

    def test_decode_expired_token_raises(self, mock_settings):
        token = jwt.encode(
            {"sub": "abcd1234abcd1234abcd1234", "iat": 1000, "exp": 1060}, "test_jwt_secret", algorithm="HS256"
        )
        with pytest.raises(ValueError, match="^Invalid token"):
            decode_access_token(token)

    def test_decode_token_without_subject_raises(self, mock_settings):
        token = jwt.encode({"iat": int(time.time())}, "test_jwt_secret", algorithm="HS256")
        with pytest.raises(ValueError, match="^Invalid token: missing subject$"):
            decode_access_token(token)
