"""Loads a user and flattens its roles and permissions into granted authorities."""

import logging

from petconnect.exceptions import UsernameNotFoundError
from petconnect.models import User
from petconnect.schemas.identity import ROLE_PREFIX, UserDetails
from petconnect.services.ports import CredentialStore

logger = logging.getLogger(__name__)


def build_authorities(user: User) -> list[str]:
    """
    ROLE_<KIND> for every role, followed by that role's permission names.

    Duplicates across roles are kept; callers must not rely on ordering.
    """
    authorities: list[str] = []
    for role in user.roles:
        authorities.append(f"{ROLE_PREFIX}{role.role_kind.value}")
        for permission in role.permissions:
            authorities.append(permission.name)
    return authorities


class UserDetailsService:
    """Resolves a login identifier (username, then email) to UserDetails."""

    def __init__(self, user_repository: CredentialStore) -> None:
        self._users = user_repository

    def load_user_by_username(self, username: str) -> UserDetails:
        logger.debug("Attempting to load user by username or email: %s", username)
        user = self._users.find_by_username(username) or self._users.find_by_email(username)
        if user is None:
            logger.warning("User not found with identifier: %s", username)
            raise UsernameNotFoundError(f"User {username} not found.")

        authorities = build_authorities(user)
        logger.debug(
            "User found: %s. Roles loaded: %s", user.username, len(user.roles)
        )
        return UserDetails(
            username=user.username,
            password=user.password_hash,
            enabled=user.is_enabled,
            account_non_expired=user.account_non_expired,
            account_non_locked=user.account_non_locked,
            credentials_non_expired=user.credentials_non_expired,
            authorities=tuple(authorities),
        )
