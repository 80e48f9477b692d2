"""FastAPI dependencies: service wiring and bearer-token authentication."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from petconnect.core.config import settings
from petconnect.core.database import get_db
from petconnect.core.security import BcryptPasswordHasher, JwtTokenIssuer, authorities_from_claims
from petconnect.exceptions import InvalidTokenError
from petconnect.repositories import (
    PasswordResetTokenRepository,
    RoleRepository,
    UserRepository,
)
from petconnect.schemas.identity import AuthenticatedIdentity
from petconnect.services.auth_service import AuthService
from petconnect.services.mailer import EmailService
from petconnect.services.mapper import UserMapper
from petconnect.services.user_details import UserDetailsService

security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(settings)


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    token_issuer: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
    password_hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> AuthService:
    """Build a request-scoped AuthService bound to this request's DB session."""
    users = UserRepository(db)
    return AuthService(
        user_repository=users,
        role_repository=RoleRepository(db),
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        user_mapper=UserMapper(),
        user_details_service=UserDetailsService(users),
        default_owner_avatar=settings.DEFAULT_OWNER_AVATAR,
        password_reset_token_repository=PasswordResetTokenRepository(db),
        email_service=EmailService(settings),
        password_reset_expire_hours=settings.PASSWORD_RESET_EXPIRE_HOURS,
    )


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_issuer: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
) -> AuthenticatedIdentity:
    """Dependency: require a valid Bearer JWT and return its identity. Raises 401 if missing or invalid."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = token_issuer.validate_token(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    sub = payload.get("sub")
    if not sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return AuthenticatedIdentity(
        username=sub,
        authorities=tuple(authorities_from_claims(payload)),
        authenticated=True,
    )
