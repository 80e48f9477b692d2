"""Owner registration, login, JWT issuance and password reset."""

import logging
import uuid
from datetime import UTC, datetime, timedelta

from petconnect.exceptions import (
    BadCredentialsError,
    EmailAlreadyExistsError,
    IllegalStateError,
    InvalidPasswordResetTokenError,
    UsernameAlreadyExistsError,
)
from petconnect.models import Owner, PasswordResetToken, RoleKind
from petconnect.schemas.auth import (
    AuthResponse,
    LoginRequest,
    OwnerProfile,
    OwnerRegistrationRequest,
    PasswordResetConfirm,
    PasswordResetRequest,
)
from petconnect.schemas.identity import AuthenticatedIdentity, UserDetails
from petconnect.services.ports import (
    CredentialStore,
    EmailSender,
    IdentityMapper,
    PasswordHasher,
    PasswordResetTokenStore,
    RoleStore,
    TokenIssuer,
    UserDetailsLookup,
)

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MESSAGE = "UserEntity logged successfully"
DEFAULT_PASSWORD_RESET_EXPIRE_HOURS = 1


class AuthService:
    """
    Orchestrates registration and login against injected collaborators.

    Every failure is raised immediately and surfaced unchanged; nothing is
    retried. Each flow performs at most one user write, after all checks pass.
    """

    def __init__(
        self,
        user_repository: CredentialStore,
        role_repository: RoleStore,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        user_mapper: IdentityMapper,
        user_details_service: UserDetailsLookup,
        default_owner_avatar: str,
        password_reset_token_repository: PasswordResetTokenStore | None = None,
        email_service: EmailSender | None = None,
        password_reset_expire_hours: int = DEFAULT_PASSWORD_RESET_EXPIRE_HOURS,
    ) -> None:
        self._users = user_repository
        self._roles = role_repository
        self._hasher = password_hasher
        self._tokens = token_issuer
        self._mapper = user_mapper
        self._user_details = user_details_service
        self.default_owner_avatar = default_owner_avatar
        self._reset_tokens = password_reset_token_repository
        self._email = email_service
        self._reset_expire_hours = password_reset_expire_hours

    def register_owner(self, request: OwnerRegistrationRequest) -> OwnerProfile:
        """
        Register a new owner after checking email, then username, uniqueness.

        Raises EmailAlreadyExistsError, UsernameAlreadyExistsError, or
        IllegalStateError when the OWNER role has not been seeded.
        """
        if self._users.exists_by_email(request.email):
            raise EmailAlreadyExistsError(request.email)

        if self._users.exists_by_username(request.username):
            raise UsernameAlreadyExistsError(request.username)

        password_hash = self._hasher.encode(request.password)

        owner_role = self._roles.find_by_role_kind(RoleKind.OWNER)
        if owner_role is None:
            logger.error("OWNER role missing; run the role seed script")
            raise IllegalStateError("OWNER role not found in database!")

        owner = Owner(
            username=request.username,
            email=request.email,
            phone=request.phone,
            password_hash=password_hash,
            roles=[owner_role],
            avatar=self.default_owner_avatar,
            is_enabled=True,
            account_non_expired=True,
            account_non_locked=True,
            credentials_non_expired=True,
        )
        saved = self._users.save(owner)
        logger.info("Registered owner id=%s username=%s", saved.id, saved.username)
        return self._mapper.to_owner_profile(saved)

    def load_user_by_username(self, username: str) -> UserDetails:
        """Raises UsernameNotFoundError when no user matches."""
        return self._user_details.load_user_by_username(username)

    def authenticate(self, username: str, password: str) -> AuthenticatedIdentity:
        """
        Verify username and password; return the authenticated identity.

        UsernameNotFoundError from the lookup propagates unchanged; a password
        mismatch raises BadCredentialsError("Incorrect Password").
        """
        user_details = self._user_details.load_user_by_username(username)
        if user_details is None:
            raise BadCredentialsError("Invalid username or password")
        if not self._hasher.matches(password, user_details.password):
            logger.info("Rejected login for %s: incorrect password", username)
            raise BadCredentialsError("Incorrect Password")
        return AuthenticatedIdentity(
            username=username,
            authorities=tuple(user_details.authorities),
            authenticated=True,
        )

    def login_user(self, request: LoginRequest) -> AuthResponse:
        identity = self.authenticate(request.username, request.password)
        access_token = self._tokens.create_token(identity)
        return AuthResponse(
            username=request.username,
            message=LOGIN_SUCCESS_MESSAGE,
            jwt=access_token,
            status=True,
        )

    def request_password_reset(self, request: PasswordResetRequest) -> None:
        """
        Issue a reset token and email it when the address is registered.
        Returns normally for unknown addresses so callers cannot probe accounts.
        """
        reset_tokens, email = self._require_reset_collaborators()
        logger.info("Processing password reset request for email: %s", request.email)
        user = self._users.find_by_email(request.email)
        if user is None:
            logger.warning("Password reset requested for non-existent email: %s", request.email)
            return

        reset_tokens.delete_for_user(user.id)
        token = reset_tokens.save(
            PasswordResetToken(
                token=str(uuid.uuid4()),
                user_id=user.id,
                expiry_date=datetime.now(UTC) + timedelta(hours=self._reset_expire_hours),
            )
        )
        logger.info("Generated and saved password reset token for user ID %s", user.id)
        email.send_password_reset_email(user.email, user.username, token.token)

    def reset_password(self, request: PasswordResetConfirm) -> None:
        """
        Set a new password using a valid reset token, then invalidate the token.

        Raises ValueError when the passwords differ and
        InvalidPasswordResetTokenError when the token is unknown, expired or orphaned.
        """
        reset_tokens, _ = self._require_reset_collaborators()
        if request.new_password != request.confirm_password:
            raise ValueError("Passwords do not match.")

        reset_token = reset_tokens.find_by_token(request.token)
        if reset_token is None:
            raise InvalidPasswordResetTokenError("Token not found.")

        if reset_token.is_expired():
            reset_tokens.delete(reset_token)
            raise InvalidPasswordResetTokenError("Token has expired.")

        user = reset_token.user
        if user is None:
            logger.error("PasswordResetToken %s has no associated user!", reset_token.id)
            reset_tokens.delete(reset_token)
            raise InvalidPasswordResetTokenError("Invalid token state.")

        user.password_hash = self._hasher.encode(request.new_password)
        self._users.save(user)
        logger.info("Password successfully reset for user ID %s", user.id)

        reset_tokens.delete(reset_token)

    def _require_reset_collaborators(self) -> tuple[PasswordResetTokenStore, EmailSender]:
        if self._reset_tokens is None or self._email is None:
            raise IllegalStateError("Password reset is not wired: token store or email sender missing")
        return self._reset_tokens, self._email
