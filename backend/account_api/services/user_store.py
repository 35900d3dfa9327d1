# account_api/services/user_store.py
"""
User Store backed by Tortoise ORM.

Creates, reads, updates and deletes user records. Passwords enter in plain
text and are hashed before they touch the database; callers never see the
hash through this interface except on the User model itself, which routers
serialize without it.
"""
from __future__ import annotations

from uuid import UUID

from tortoise.transactions import in_transaction

from account_api.core.security import hash_password, verify_password
from account_api.models.token import AuthToken
from account_api.models.user import User


class UserStore:
    """Persistence collaborator for user accounts."""

    async def exists(self, username: str) -> bool:
        """Whether an account already uses this username."""
        return await User.filter(username=username).exists()

    async def create_user(self, username: str, password: str) -> str:
        """
        Create an account and return its id.

        Note:
            exists() followed by create_user() is not atomic. A concurrent
            signup with the same name fails here on the unique index instead.
        """
        u = await User.create(username=username, password_hash=hash_password(password))
        return str(u.id)

    async def get_user(self, user_id: str | UUID) -> User | None:
        return await User.get_or_none(id=user_id)

    async def get_id_by_name(self, username: str) -> str | None:
        u = await User.get_or_none(username=username)
        return str(u.id) if u else None

    async def matches_password(self, user_id: str | UUID, password: str) -> bool:
        """Verify a plain password against the stored hash; unknown ids never match."""
        u = await User.get_or_none(id=user_id)
        if not u:
            return False
        return verify_password(password, u.password_hash)

    async def change_password(self, user_id: str | UUID, new_password: str) -> None:
        await User.filter(id=user_id).update(password_hash=hash_password(new_password))

    async def delete_user(self, user_id: str | UUID) -> None:
        """Delete the account together with every session token it holds, atomically."""
        async with in_transaction() as conn:
            await AuthToken.filter(user_id=user_id).using_db(conn).delete()
            await User.filter(id=user_id).using_db(conn).delete()
