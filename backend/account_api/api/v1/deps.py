# account_api/api/v1/deps.py
from fastapi import Depends, Request
from account_api.services import TokenStore, UserStore

# Cookie names shared by the resolver and the routers that set/clear them
AUTH_COOKIE = "auth_token"
USER_ID_COOKIE = "user_id"

_user_store = UserStore()
_token_store = TokenStore()

def get_user_store() -> UserStore:
    """
    FastAPI dependency providing the User Store.

    Override in tests with:
        app.dependency_overrides[get_user_store] = lambda: FakeUserStore()
    """
    return _user_store

def get_token_store() -> TokenStore:
    """FastAPI dependency providing the Token Store."""
    return _token_store

async def authenticate(
    request: Request,
    tokens: TokenStore = Depends(get_token_store),
) -> str | None:
    """
    FastAPI dependency resolving the request's session to a user id.

    Reads two cookies:
    1. auth_token - opaque session token
    2. user_id - id the client believes it is logged in as

    Returns:
        str: the user id, when the token is known and bound to that same id
        None: otherwise (no cookies, unknown token, or id mismatch)

    Never raises 401 itself: signup/login require the caller to be logged
    out, the other handlers require a session. Each handler branches on
    the result.
    """
    token = request.cookies.get(AUTH_COOKIE)
    claimed_id = request.cookies.get(USER_ID_COOKIE)
    if not token or not claimed_id:
        return None

    user_id = await tokens.get_user_id(token)
    if user_id is None or user_id != claimed_id:
        return None
    return user_id
