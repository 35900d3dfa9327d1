"""
Unit tests for the Tortoise-backed User Store and Token Store.
Each test runs against a fresh in-memory SQLite database.
"""
import pytest

from account_api.models import AuthToken, User
from account_api.services import user_store as user_store_module


pytestmark = pytest.mark.asyncio


async def test_create_user_stores_hash_only(db, user_store):
    user_id = await user_store.create_user("alice12", "password123")

    row = await User.get(id=user_id)
    assert row.username == "alice12"
    assert row.password_hash != "password123"
    assert row.password_hash.startswith("$argon2")


async def test_exists_and_lookup_by_name(db, user_store):
    assert await user_store.exists("alice12") is False
    assert await user_store.get_id_by_name("alice12") is None

    user_id = await user_store.create_user("alice12", "password123")
    assert await user_store.exists("alice12") is True
    assert await user_store.get_id_by_name("alice12") == user_id


async def test_matches_password(db, user_store):
    user_id = await user_store.create_user("alice12", "password123")
    assert await user_store.matches_password(user_id, "password123") is True
    assert await user_store.matches_password(user_id, "password124") is False


async def test_change_password(db, user_store):
    user_id = await user_store.create_user("alice12", "password123")
    await user_store.change_password(user_id, "brand-new-pass")
    assert await user_store.matches_password(user_id, "password123") is False
    assert await user_store.matches_password(user_id, "brand-new-pass") is True


async def test_token_roundtrip_and_delete(db, user_store, token_store):
    user_id = await user_store.create_user("alice12", "password123")
    token = await token_store.create_token(user_id)

    assert await token_store.get_user_id(token) == user_id
    row = await AuthToken.get(user_id=user_id)
    assert row.token_hash != token

    await token_store.delete_token(token)
    assert await token_store.get_user_id(token) is None
    # Deleting an unknown token is a no-op
    await token_store.delete_token(token)


async def test_multiple_tokens_per_user(db, user_store, token_store):
    user_id = await user_store.create_user("alice12", "password123")
    first = await token_store.create_token(user_id)
    second = await token_store.create_token(user_id)
    assert first != second

    await token_store.delete_token(first)
    assert await token_store.get_user_id(first) is None
    assert await token_store.get_user_id(second) == user_id


async def test_delete_user_removes_tokens(db, user_store, token_store):
    user_id = await user_store.create_user("alice12", "password123")
    token = await token_store.create_token(user_id)

    await user_store.delete_user(user_id)

    assert await user_store.get_user(user_id) is None
    assert await user_store.exists("alice12") is False
    assert await token_store.get_user_id(token) is None
    assert await AuthToken.filter(user_id=user_id).count() == 0


class _FailingUserQuery:
    def using_db(self, conn):
        return self

    async def delete(self):
        raise RuntimeError("users table locked")


class _FailingUserModel:
    @staticmethod
    def filter(**kwargs):
        return _FailingUserQuery()


async def test_delete_user_rolls_back_tokens_on_failure(db, user_store, token_store, monkeypatch):
    user_id = await user_store.create_user("alice12", "password123")
    token = await token_store.create_token(user_id)

    monkeypatch.setattr(user_store_module, "User", _FailingUserModel)
    with pytest.raises(RuntimeError):
        await user_store.delete_user(user_id)
    monkeypatch.undo()

    # Account and its session survive together
    assert await user_store.get_user(user_id) is not None
    assert await token_store.get_user_id(token) == user_id
