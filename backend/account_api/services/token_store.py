# account_api/services/token_store.py
"""
Token Store backed by Tortoise ORM.

Issues opaque session tokens bound to a user id. Only sha256(token) is
persisted; the plain token exists in the issuing response and in the
client's cookie.
"""
from __future__ import annotations

from uuid import UUID

from account_api.core.security import new_session_token, token_digest
from account_api.models.token import AuthToken


class TokenStore:
    """Persistence collaborator for session tokens."""

    async def create_token(self, user_id: str | UUID) -> str:
        """Issue a new token for user_id. Earlier tokens of the same user stay valid."""
        token = new_session_token()
        await AuthToken.create(token_hash=token_digest(token), user_id=user_id)
        return token

    async def get_user_id(self, token: str) -> str | None:
        """Resolve a plain token to the id of the user it was issued to."""
        row = await AuthToken.get_or_none(token_hash=token_digest(token))
        return str(row.user_id) if row else None

    async def delete_token(self, token: str) -> None:
        """Invalidate a session. Unknown tokens are ignored."""
        await AuthToken.filter(token_hash=token_digest(token)).delete()
