# account_api/core/security.py
"""
Security primitives for account management.
Handles password hashing and opaque session token generation.
"""
import hashlib
import secrets
from passlib.context import CryptContext

# Password hashing context
# Argon2 is a modern, secure password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

# Entropy of a session token in bytes (token_urlsafe output is ~1.3x longer)
SESSION_TOKEN_BYTES = 32

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)

    Note: Never store plain text passwords. Always use this function before saving.
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)

def new_session_token() -> str:
    """
    Generate a fresh opaque session token.

    The plain token is only handed to the client (cookie); the database
    keeps token_digest(token).
    """
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)

def token_digest(token: str) -> str:
    """SHA-256 hex digest of a session token (64 characters)."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
