"""ORM models for application users (auth and RBAC)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    func,
)
from sqlalchemy.orm import relationship

from petconnect.models.base import Base
from petconnect.models.role import Role

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    """
    Base user account for JWT authentication and role-based access control.

    Owners (and, later, clinic staff) extend this via joined-table inheritance.
    password_hash never holds a plain-text password.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(1024), nullable=True)
    is_enabled = Column(Boolean, nullable=False, default=True)
    account_non_expired = Column(Boolean, nullable=False, default=True)
    account_non_locked = Column(Boolean, nullable=False, default=True)
    credentials_non_expired = Column(Boolean, nullable=False, default=True)
    user_type = Column(String(32), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    roles = relationship(Role, secondary=user_roles, lazy="selectin")

    __mapper_args__ = {
        "polymorphic_on": user_type,
        "polymorphic_identity": "user",
    }


class Owner(User):
    """Pet owner account; adds a contact phone number."""

    __tablename__ = "owners"

    id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    phone = Column(String(20), nullable=False)

    __mapper_args__ = {"polymorphic_identity": "owner"}
