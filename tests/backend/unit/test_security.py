"""
Unit tests for core.security module.
Tests password hashing and session token generation.
"""
from account_api.core.security import (
    hash_password,
    verify_password,
    new_session_token,
    token_digest,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "TestPassword123"
        hash1 = hash_password(password)
        hash2 = hash_password(password)
        assert hash1 != hash2  # Different salts produce different hashes

    def test_hash_password_produces_argon2_hash(self):
        password = "TestPassword123"
        hashed = hash_password(password)
        assert isinstance(hashed, str)
        assert hashed.startswith("$argon2")
        assert password not in hashed

    def test_verify_password_correct_password(self):
        password = "TestPassword123"
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False


class TestSessionTokens:
    """Tests for opaque session tokens."""

    def test_new_session_token_is_unique(self):
        tokens = {new_session_token() for _ in range(50)}
        assert len(tokens) == 50

    def test_new_session_token_is_cookie_safe(self):
        token = new_session_token()
        assert len(token) >= 40
        assert all(c.isalnum() or c in "-_" for c in token)

    def test_token_digest_is_stable_sha256_hex(self):
        token = new_session_token()
        digest = token_digest(token)
        assert digest == token_digest(token)
        assert len(digest) == 64
        assert digest != token
        assert token_digest("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
