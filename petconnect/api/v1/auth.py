"""Registration, login and password reset endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from petconnect.api.deps import get_auth_service, get_current_identity
from petconnect.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    OwnerProfile,
    OwnerRegistrationRequest,
    PasswordResetConfirm,
    PasswordResetRequest,
)
from petconnect.schemas.identity import AuthenticatedIdentity
from petconnect.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=OwnerProfile, status_code=status.HTTP_201_CREATED)
def register_owner(
    body: OwnerRegistrationRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> OwnerProfile:
    """Register a new pet owner. 409 when the email or username is taken."""
    return auth_service.register_owner(body)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """
    Authenticate with username (or email) and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <jwt>
    """
    return auth_service.login_user(body)


@router.post("/forgot-password", response_model=MessageResponse)
def request_password_reset(
    body: PasswordResetRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Always 200 so the response does not reveal whether the email is registered."""
    auth_service.request_password_reset(body)
    return MessageResponse(message="Password reset instructions sent if email is registered.")


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(
    body: PasswordResetConfirm,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    auth_service.reset_password(body)
    return MessageResponse(message="Password has been reset successfully.")


@router.get("/me", response_model=AuthenticatedIdentity)
def read_current_identity(
    identity: Annotated[AuthenticatedIdentity, Depends(get_current_identity)],
) -> AuthenticatedIdentity:
    """Identity and authorities carried by the caller's bearer token."""
    return identity
