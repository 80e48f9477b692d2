"""Password hashing and JWT creation/verification for authentication."""

import logging
import uuid
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from petconnect.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from petconnect.core.config import Settings
    from petconnect.services.ports import SignableIdentity

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Claim carrying the comma-joined granted authorities.
AUTHORITIES_CLAIM = "authorities"


class BcryptPasswordHasher:
    """One-way password hashing backed by bcrypt."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    def encode(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Do not store plain passwords."""
        # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
        pw_bytes = plain_password.encode("utf-8")[:72]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def matches(self, plain_password: str, hashed: str) -> bool:
        """Verify a plain password against a stored hash."""
        pw_bytes = plain_password.encode("utf-8")[:72]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


class JwtTokenIssuer:
    """Signs access tokens for authenticated identities and validates them."""

    def __init__(self, settings: "Settings") -> None:
        self._secret = settings.JWT_SECRET.get_secret_value()
        self._issuer = settings.JWT_ISSUER
        self._algorithm = settings.JWT_ALGORITHM
        self._expire_minutes = settings.JWT_EXPIRE_MINUTES

    def create_token(self, identity: "SignableIdentity") -> str:
        """Create a JWT with iss, sub, authorities, iat, nbf, exp and a unique jti."""
        now = datetime.now(UTC)
        expire = now + timedelta(minutes=self._expire_minutes)
        claims = identity.to_claims()
        payload: dict[str, Any] = {
            "iss": self._issuer,
            "sub": str(claims["sub"]),
            AUTHORITIES_CLAIM: ",".join(claims[AUTHORITIES_CLAIM]),
            "iat": now,
            "nbf": now,
            "exp": expire,
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate_token(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a JWT; return its payload.
        Raises InvalidTokenError on a bad signature, wrong issuer or expired token.
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
        except jwt.PyJWTError as e:
            logger.debug("JWT validation failed: %s", e)
            raise InvalidTokenError("Token invalid. not authorized") from e


def authorities_from_claims(payload: dict[str, Any]) -> list[str]:
    """Split the comma-joined authorities claim back into a list."""
    raw = payload.get(AUTHORITIES_CLAIM) or ""
    return [a for a in raw.split(",") if a]
