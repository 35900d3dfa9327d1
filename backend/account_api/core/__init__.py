# account_api/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Error messages and the {"error": ...} exception handlers
- security: Password hashing and session token generation
- validation: Username/password shape checks
"""
