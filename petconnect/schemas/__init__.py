"""Pydantic request/response schemas."""

from petconnect.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    OwnerProfile,
    OwnerRegistrationRequest,
    PasswordResetConfirm,
    PasswordResetRequest,
)
from petconnect.schemas.health import HealthResponse
from petconnect.schemas.identity import AuthenticatedIdentity, UserDetails

__all__ = [
    "AuthResponse",
    "AuthenticatedIdentity",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "OwnerProfile",
    "OwnerRegistrationRequest",
    "PasswordResetConfirm",
    "PasswordResetRequest",
    "UserDetails",
]
