"""
Services Module

Persistence collaborators used by the account endpoints:
- UserStore: user records and password checks
- TokenStore: session token issue / lookup / deletion
"""

from .user_store import UserStore
from .token_store import TokenStore

__all__ = [
    "UserStore",
    "TokenStore",
]
