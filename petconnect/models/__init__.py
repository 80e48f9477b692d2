"""SQLAlchemy ORM models."""

from petconnect.models.base import Base
from petconnect.models.password_reset_token import PasswordResetToken
from petconnect.models.role import Permission, Role, RoleKind
from petconnect.models.user import Owner, User

__all__ = [
    "Base",
    "Owner",
    "PasswordResetToken",
    "Permission",
    "Role",
    "RoleKind",
    "User",
]
