# account_api/schemas/users.py
"""
Pydantic schemas for the account endpoints.
Fields are strictly typed at the boundary; presence and length rules are
checked by the handlers so each one can answer with its own message.
"""
from pydantic import BaseModel, StrictStr

class CredentialsIn(BaseModel):
    """
    Request body for signup and login.
    """
    username: StrictStr | None = None  # Login name (3-20 characters)
    password: StrictStr | None = None  # Plain text password (10-32 characters, hashed server-side)

class ChangePasswordIn(BaseModel):
    """
    Request body for changing the password of the logged-in user.
    """
    old_password: StrictStr | None = None  # Must match the stored hash
    new_password: StrictStr | None = None  # Replaces the stored hash

class UserOut(BaseModel):
    """
    User information returned to clients.
    Never carries the password hash.
    """
    id: str  # User unique identifier (UUID string)
    username: str  # User login name
    created_at: str | None = None  # ISO-8601 creation timestamp
