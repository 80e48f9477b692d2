"""Framework-neutral identity values produced by the auth service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ROLE_PREFIX = "ROLE_"


class UserDetails(BaseModel):
    """Everything the auth layer needs to verify a login for one user."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(..., description="Stored password hash")
    enabled: bool = True
    account_non_expired: bool = True
    account_non_locked: bool = True
    credentials_non_expired: bool = True
    # Role authorities (ROLE_<KIND>) and permission names; not deduplicated.
    authorities: tuple[str, ...] = ()


class AuthenticatedIdentity(BaseModel):
    """Username plus granted authorities for a verified principal."""

    model_config = ConfigDict(frozen=True)

    username: str
    authorities: tuple[str, ...] = ()
    authenticated: bool = True

    def to_claims(self) -> dict[str, Any]:
        """Claims to sign into an access token."""
        return {"sub": self.username, "authorities": list(self.authorities)}
