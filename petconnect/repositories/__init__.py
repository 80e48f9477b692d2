"""SQLAlchemy-backed stores for users, roles and password reset tokens."""

from petconnect.repositories.password_reset_tokens import PasswordResetTokenRepository
from petconnect.repositories.roles import RoleRepository
from petconnect.repositories.users import UserRepository

__all__ = ["PasswordResetTokenRepository", "RoleRepository", "UserRepository"]
