"""Role reference data lookups."""

from sqlalchemy.orm import Session

from petconnect.models import Role, RoleKind


class RoleRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_role_kind(self, kind: RoleKind) -> Role | None:
        return self._db.query(Role).filter(Role.role_kind == kind).first()

    def find_all(self) -> list[Role]:
        return self._db.query(Role).order_by(Role.id).all()
