"""Contracts the auth service depends on. Concrete implementations live in
petconnect.repositories, petconnect.core.security and the sibling service modules."""

from typing import Any, Protocol

from petconnect.models import Owner, PasswordResetToken, Role, RoleKind, User
from petconnect.schemas.auth import OwnerProfile
from petconnect.schemas.identity import UserDetails


class CredentialStore(Protocol):
    def exists_by_email(self, email: str) -> bool: ...

    def exists_by_username(self, username: str) -> bool: ...

    def find_by_username(self, username: str) -> User | None: ...

    def find_by_email(self, email: str) -> User | None: ...

    def save(self, user: User) -> User: ...


class RoleStore(Protocol):
    def find_by_role_kind(self, kind: RoleKind) -> Role | None: ...


class PasswordResetTokenStore(Protocol):
    def save(self, token: PasswordResetToken) -> PasswordResetToken: ...

    def find_by_token(self, token: str) -> PasswordResetToken | None: ...

    def delete(self, token: PasswordResetToken) -> None: ...

    def delete_for_user(self, user_id: int) -> int: ...


class PasswordHasher(Protocol):
    def encode(self, plain_password: str) -> str: ...

    def matches(self, plain_password: str, hashed: str) -> bool: ...


class SignableIdentity(Protocol):
    """Anything that can hand the token issuer a subject and authorities."""

    def to_claims(self) -> dict[str, Any]: ...


class TokenIssuer(Protocol):
    def create_token(self, identity: SignableIdentity) -> str: ...


class IdentityMapper(Protocol):
    def to_owner_profile(self, owner: Owner) -> OwnerProfile: ...


class UserDetailsLookup(Protocol):
    def load_user_by_username(self, username: str) -> UserDetails | None: ...


class EmailSender(Protocol):
    def send_password_reset_email(
        self, recipient_email: str, recipient_name: str, reset_token: str
    ) -> bool: ...
