"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Min/max lengths for input validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128
PHONE_MAX_LEN = 20


class OwnerRegistrationRequest(BaseModel):
    """New pet owner account. The password is plain text and hashed by the service."""

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Unique username",
    )
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )
    phone: str = Field(..., min_length=1, max_length=PHONE_MAX_LEN, description="Contact phone")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username or email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class AuthResponse(BaseModel):
    """Result of a successful login, including the signed JWT."""

    username: str
    message: str
    jwt: str = Field(..., description="JWT access token")
    status: bool


class OwnerProfile(BaseModel):
    """Public profile of an owner (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    roles: set[str]
    avatar: str | None = None
    phone: str


class PasswordResetRequest(BaseModel):
    """Ask for a reset link to be emailed."""

    email: EmailStr


class PasswordResetConfirm(BaseModel):
    """New password submitted together with the emailed token."""

    token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    confirm_password: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
