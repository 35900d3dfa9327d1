# account_api/core/errors.py
"""
Error handling for the account endpoints.

Every failure leaves the service as JSON of the form {"error": message}:
- HTTPException raised by handlers keeps its status code, detail becomes the message
- request body validation failures become 400 "Invalid parameters"
- anything unexpected becomes 500 "Internal server error" and is logged server-side only
"""
import logging
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("uvicorn.error")

INVALID_PARAMETERS = "Invalid parameters"
BAD_USERNAME_OR_PASSWORD = (
    "Bad username or password. Username must be between 3 and 20 characters "
    "and password must be between 10 and 32 characters"
)
ALREADY_LOGGED_IN = "Already logged in"
NOT_LOGGED_IN = "Not logged in or invalid token"
INVALID_CREDENTIALS = "Invalid credentials"
USER_EXISTS = "User already exists"
INTERNAL_ERROR = "Internal server error"


@contextmanager
def internal_errors(action: str):
    """
    Map unexpected failures inside the block to HTTP 500.

    HTTPException passes through untouched so handlers can still answer
    409/401 from inside the guarded block:

        with internal_errors("signup"):
            await users.create_user(...)
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception:
        logger.exception("[users] %s failed", action)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("[users] rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_PARAMETERS})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[app] unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": INTERNAL_ERROR})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the {"error": ...} renderers on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
