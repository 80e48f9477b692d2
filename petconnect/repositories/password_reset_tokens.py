"""Password reset token persistence."""

from sqlalchemy.orm import Session

from petconnect.models import PasswordResetToken


class PasswordResetTokenRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def save(self, token: PasswordResetToken) -> PasswordResetToken:
        self._db.add(token)
        self._db.commit()
        self._db.refresh(token)
        return token

    def find_by_token(self, token: str) -> PasswordResetToken | None:
        return (
            self._db.query(PasswordResetToken)
            .filter(PasswordResetToken.token == token)
            .first()
        )

    def delete(self, token: PasswordResetToken) -> None:
        self._db.delete(token)
        self._db.commit()

    def delete_for_user(self, user_id: int) -> int:
        """Remove every outstanding token of a user; returns how many were deleted."""
        deleted = (
            self._db.query(PasswordResetToken)
            .filter(PasswordResetToken.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self._db.commit()
        return deleted
