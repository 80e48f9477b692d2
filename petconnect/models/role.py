"""ORM models for roles and the permissions they grant."""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from petconnect.models.base import Base


class RoleKind(str, enum.Enum):
    """Roles a user can hold. Stored by name."""

    OWNER = "OWNER"
    VET = "VET"
    ADMIN = "ADMIN"
    SUPERUSER = "SUPERUSER"


role_permission = Table(
    "role_permission",
    Base.metadata,
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "permission_id",
        Integer,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Permission(Base):
    """A named capability granted through a role (e.g. PET_READ_OWN)."""

    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class Role(Base):
    """
    Reference data: one row per RoleKind with its permission set.

    Looked up by kind during registration; never modified by the auth flows.
    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    role_kind = Column(
        "role_name",
        Enum(RoleKind, name="role_kind", native_enum=False, length=32),
        nullable=False,
        unique=True,
    )
    permissions = relationship(
        Permission,
        secondary=role_permission,
        lazy="selectin",
    )
