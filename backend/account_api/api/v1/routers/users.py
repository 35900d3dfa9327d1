# account_api/api/v1/routers/users.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from account_api.api.v1.deps import (
    AUTH_COOKIE,
    USER_ID_COOKIE,
    authenticate,
    get_token_store,
    get_user_store,
)
from account_api.config import settings
from account_api.core.errors import (
    ALREADY_LOGGED_IN,
    BAD_USERNAME_OR_PASSWORD,
    INVALID_CREDENTIALS,
    INVALID_PARAMETERS,
    NOT_LOGGED_IN,
    USER_EXISTS,
    internal_errors,
)
from account_api.core.validation import is_valid_user
from account_api.models.user import User
from account_api.schemas.users import ChangePasswordIn, CredentialsIn, UserOut
from account_api.services import TokenStore, UserStore

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/users", tags=["users"])


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _set_session_cookies(response: Response, token: str, user_id: str) -> None:
    """Attach auth_token + user_id cookies, both living session_max_age seconds."""
    max_age = settings.session_max_age
    response.set_cookie(
        AUTH_COOKIE, token, max_age=max_age,
        httponly=True, secure=settings.cookie_secure, samesite=settings.cookie_samesite,
    )
    response.set_cookie(
        USER_ID_COOKIE, user_id, max_age=max_age,
        secure=settings.cookie_secure, samesite=settings.cookie_samesite,
    )


def _clear_session_cookies(response: Response) -> None:
    response.delete_cookie(AUTH_COOKIE, httponly=True, secure=settings.cookie_secure, samesite=settings.cookie_samesite)
    response.delete_cookie(USER_ID_COOKIE, secure=settings.cookie_secure, samesite=settings.cookie_samesite)


def _user_to_dict(u: User) -> dict:
    """Serialize a user for clients. The password hash is never included."""
    return UserOut(
        id=str(u.id),
        username=u.username,
        created_at=u.created_at.isoformat() if u.created_at else None,
    ).model_dump()


def _require_session(user_id: str | None) -> str:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_LOGGED_IN)
    return user_id


async def _read_user(user_id: str, users: UserStore, action: str) -> dict:
    with internal_errors(action):
        u = await users.get_user(user_id)
    if not u:
        # Session outlived its account
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_LOGGED_IN)
    return _user_to_dict(u)


# ------------------------------------------------------------------------------
# Routes
# ------------------------------------------------------------------------------
@router.get("/authenticated")
async def is_authenticated(user_id: str | None = Depends(authenticate)):
    """
    Report whether the request carries a valid session.

    Returns:
        dict: {"response": bool}
    """
    return {"response": bool(user_id)}


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CredentialsIn,
    response: Response,
    user_id: str | None = Depends(authenticate),
    users: UserStore = Depends(get_user_store),
    tokens: TokenStore = Depends(get_token_store),
):
    """
    Register a new account and log it in.

    Validates the credentials, refuses callers that already hold a session,
    creates the user and issues a session token. The token and the new id
    are set as cookies (auth_token, user_id) valid for 15 days.

    Args:
        body: Request body with username (3-20 chars) and password (10-32 chars)
        response: Response object (for setting cookies)
        user_id: Current session's user id, if any (from dependency)

    Returns:
        dict: {"response": <new user id>} with status 201

    Raises:
        HTTPException (400): Missing parameters or bad username/password shape
        HTTPException (401): Already logged in
        HTTPException (409): Username already taken
        HTTPException (500): Store failure
    """
    if not body.username or not body.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PARAMETERS)
    if not is_valid_user(body.username, body.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_USERNAME_OR_PASSWORD)
    if user_id is not None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ALREADY_LOGGED_IN)

    with internal_errors("signup"):
        if await users.exists(body.username):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USER_EXISTS)
        new_id = await users.create_user(body.username, body.password)
        token = await tokens.create_token(new_id)

    logger.info("[users] created user id=%s", new_id)
    _set_session_cookies(response, token, new_id)
    return {"response": new_id}


@router.get("")
async def get_user(
    user_id: str | None = Depends(authenticate),
    users: UserStore = Depends(get_user_store),
):
    """
    Get the account record of the logged-in user (without password hash).

    Raises:
        HTTPException (401): Not logged in or invalid token
        HTTPException (500): Store failure
    """
    user_id = _require_session(user_id)
    return {"response": await _read_user(user_id, users, "get user")}


@router.get("/me")
async def get_myself(
    user_id: str | None = Depends(authenticate),
    users: UserStore = Depends(get_user_store),
):
    """Same payload as GET /users, addressed as the caller's own profile."""
    user_id = _require_session(user_id)
    return {"response": await _read_user(user_id, users, "get myself")}


@router.post("/login", status_code=status.HTTP_201_CREATED)
async def login_user(
    body: CredentialsIn,
    response: Response,
    user_id: str | None = Depends(authenticate),
    users: UserStore = Depends(get_user_store),
    tokens: TokenStore = Depends(get_token_store),
):
    """
    Authenticate with username/password and open a new session.

    A user may hold several sessions at once; logging in elsewhere does not
    invalidate earlier tokens.

    Returns:
        dict: {"response": <user id>} with status 201, cookies set

    Raises:
        HTTPException (400): Credentials fail the username/password shape check
        HTTPException (401): Already logged in, or invalid credentials
        HTTPException (500): Store failure
    """
    if not is_valid_user(body.username, body.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PARAMETERS)
    if user_id is not None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ALREADY_LOGGED_IN)

    with internal_errors("login"):
        found_id = await users.get_id_by_name(body.username)
        if not found_id or not await users.matches_password(found_id, body.password):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
        token = await tokens.create_token(found_id)

    _set_session_cookies(response, token, found_id)
    return {"response": found_id}


@router.post("/logout")
async def logout_user(
    request: Request,
    response: Response,
    user_id: str | None = Depends(authenticate),
    tokens: TokenStore = Depends(get_token_store),
):
    """
    Invalidate the current session token and clear both session cookies.

    Other sessions of the same user are left alone.

    Raises:
        HTTPException (401): Not logged in or invalid token
        HTTPException (500): Store failure
    """
    _require_session(user_id)

    with internal_errors("logout"):
        await tokens.delete_token(request.cookies[AUTH_COOKIE])

    _clear_session_cookies(response)
    return {"response": "Logged out"}


@router.post("/change-password")
async def change_password(
    body: ChangePasswordIn,
    user_id: str | None = Depends(authenticate),
    users: UserStore = Depends(get_user_store),
):
    """
    Change the logged-in user's password after re-checking the old one.

    Args:
        body: Request body containing old_password and new_password

    Returns:
        dict: {"response": "Password changed"}

    Raises:
        HTTPException (401): Not logged in, or old password does not match
        HTTPException (400): Missing old_password/new_password
        HTTPException (500): Store failure

    Note:
        Existing sessions stay valid after the change.
    """
    user_id = _require_session(user_id)
    if not body.old_password or not body.new_password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PARAMETERS)

    with internal_errors("change password"):
        if not await users.matches_password(user_id, body.old_password):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
        await users.change_password(user_id, body.new_password)

    return {"response": "Password changed"}


@router.delete("/me")
async def delete_user(
    user_id: str | None = Depends(authenticate),
    users: UserStore = Depends(get_user_store),
):
    """
    Permanently delete the logged-in user's account.

    All of the user's session tokens are removed with it, so the caller's
    cookies stop authenticating immediately.

    Raises:
        HTTPException (401): Not logged in or invalid token
        HTTPException (500): Store failure
    """
    user_id = _require_session(user_id)

    with internal_errors("delete user"):
        await users.delete_user(user_id)

    logger.info("[users] deleted user id=%s", user_id)
    return {"response": "User deleted"}
