# account_api/models/user.py
"""
Database model for users.
Represents an account in the system, containing its login name and
password hash.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many AuthTokens (one-to-many, via related_name="tokens")

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Username must be unique across all users
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=20,
        unique=True,
        index=True
    )  # Login name, 3-20 characters (unique, indexed for lookups by name)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never returned to clients
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
