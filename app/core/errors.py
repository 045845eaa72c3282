# File: app/core/errors.py

"""
Error taxonomy for the auth portal and the FastAPI handlers that render it.

Every error carries a generic, user-facing message. Internal details
(driver errors, which half of a credential was wrong) only go to the log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AuthPortalError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class StoreError(AuthPortalError):
    """Connectivity or constraint failure in the credential store."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Service temporarily unavailable"


class DuplicateEmailError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentials(AuthPortalError):
    """Wrong email or wrong password. Both render identically."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid email or password"


class Unauthorized(AuthPortalError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(AuthPortalError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied. Admins only."


async def auth_portal_error_handler(request: Request, exc: AuthPortalError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s - %s %s", exc.message, request.method, request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error - %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthPortalError, auth_portal_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
