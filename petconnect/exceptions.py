"""Domain exceptions raised by the auth service and its collaborators."""


class AuthServiceError(Exception):
    """Base for errors raised by registration, login and password reset."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmailAlreadyExistsError(AuthServiceError):
    """Registration attempted with an email that is already in use."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already in use: {email}")


class UsernameAlreadyExistsError(AuthServiceError):
    """Registration attempted with a username that is already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already taken: {username}")


class UsernameNotFoundError(AuthServiceError):
    """No user matches the given username (or email)."""


class BadCredentialsError(AuthServiceError):
    """The supplied credentials could not be verified."""


class InvalidTokenError(AuthServiceError):
    """A bearer token failed signature, issuer or expiry checks."""


class InvalidPasswordResetTokenError(AuthServiceError):
    """Password reset token is unknown, expired or detached from its user."""


class IllegalStateError(AuthServiceError):
    """Server misconfiguration, e.g. a required seed role is missing. Not user-caused."""
