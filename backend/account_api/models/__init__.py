# account_api/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: User account and authentication model
- AuthToken: Session token bound to a User
"""
from .user import User
from .token import AuthToken
