"""Map domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from petconnect.exceptions import (
    BadCredentialsError,
    EmailAlreadyExistsError,
    IllegalStateError,
    InvalidPasswordResetTokenError,
    InvalidTokenError,
    UsernameAlreadyExistsError,
    UsernameNotFoundError,
)

logger = logging.getLogger(__name__)

# Exception type -> HTTP status. Checked in order; first isinstance match wins.
STATUS_BY_EXCEPTION: tuple[tuple[type[Exception], int], ...] = (
    (EmailAlreadyExistsError, status.HTTP_409_CONFLICT),
    (UsernameAlreadyExistsError, status.HTTP_409_CONFLICT),
    (UsernameNotFoundError, status.HTTP_401_UNAUTHORIZED),
    (BadCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (InvalidPasswordResetTokenError, status.HTTP_400_BAD_REQUEST),
    (IllegalStateError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def _status_for(exc: Exception) -> int:
    for exc_type, code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    code = _status_for(exc)
    if code >= 500:
        logger.error("Server error on %s %s: %s", request.method, request.url.path, exc)
        detail = "Internal server error"
    else:
        detail = getattr(exc, "message", str(exc))
    headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=code, content={"detail": detail}, headers=headers)


async def _value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    for exc_type, _ in STATUS_BY_EXCEPTION:
        app.add_exception_handler(exc_type, _domain_error_handler)
    app.add_exception_handler(ValueError, _value_error_handler)
