"""ORM model for single-use password reset tokens."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from petconnect.models.base import Base
from petconnect.models.user import User


class PasswordResetToken(Base):
    """Random token emailed to a user; valid until expiry_date (UTC)."""

    __tablename__ = "password_reset_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_pwd_reset_token_user"),
        nullable=False,
    )
    expiry_date = Column(DateTime(timezone=True), nullable=False)

    user = relationship(User)

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once the current time is past expiry_date."""
        now = now or datetime.now(UTC)
        expiry = self.expiry_date
        # SQLite drops tzinfo on round trip; stored values are always UTC.
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return now > expiry
