"""User persistence: existence checks, lookups and save."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petconnect.exceptions import EmailAlreadyExistsError, UsernameAlreadyExistsError
from petconnect.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def exists_by_email(self, email: str) -> bool:
        return self._db.query(User.id).filter(User.email == email).first() is not None

    def exists_by_username(self, username: str) -> bool:
        return self._db.query(User.id).filter(User.username == username).first() is not None

    def find_by_username(self, username: str) -> User | None:
        return self._db.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> User | None:
        return self._db.query(User).filter(User.email == email).first()

    def save(self, user: User) -> User:
        """
        Insert or update the user and commit; return it with generated fields loaded.

        A unique-constraint violation (a concurrent registration won the race) is
        translated into EmailAlreadyExistsError or UsernameAlreadyExistsError.
        """
        self._db.add(user)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logger.warning("Unique constraint violation saving user %s: %s", user.username, e.orig)
            if self.exists_by_email(user.email):
                raise EmailAlreadyExistsError(user.email) from e
            if self.exists_by_username(user.username):
                raise UsernameAlreadyExistsError(user.username) from e
            raise
        self._db.refresh(user)
        return user
