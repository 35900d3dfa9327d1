import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from account_api.core import db as db_module
from account_api.main import app
from account_api.services import TokenStore, UserStore


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh database for tests that talk to the stores directly.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Cookies set by the app persist in the client's jar between requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user_store():
    return UserStore()


@pytest_asyncio.fixture
async def token_store():
    return TokenStore()


@pytest_asyncio.fixture
async def create_user(db, user_store):
    """
    Factory fixture to create users directly through the User Store.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[str, str, str]:
        username = f"user_{uuid.uuid4().hex[:6]}"
        user_id = await user_store.create_user(username, password)
        return user_id, username, password

    return _create_user
