"""Unit tests for petconnect.services.auth_service: registration, login and authentication."""

import unittest
from unittest.mock import MagicMock

from petconnect.exceptions import (
    BadCredentialsError,
    EmailAlreadyExistsError,
    IllegalStateError,
    UsernameAlreadyExistsError,
    UsernameNotFoundError,
)
from petconnect.models import Owner, Role, RoleKind
from petconnect.schemas.auth import LoginRequest, OwnerProfile, OwnerRegistrationRequest
from petconnect.schemas.identity import AuthenticatedIdentity, UserDetails
from petconnect.services.auth_service import AuthService

DEFAULT_AVATAR = "images/avatars/users/owner.png"


def _registration() -> OwnerRegistrationRequest:
    return OwnerRegistrationRequest(
        username="testuser",
        email="test@example.com",
        password="password123",
        phone="123456789",
    )


def _owner_role() -> Role:
    return Role(id=1, role_kind=RoleKind.OWNER)


def _saved_owner(role: Role) -> Owner:
    return Owner(
        id=1,
        username="testuser",
        email="test@example.com",
        phone="123456789",
        password_hash="hashedPassword",
        roles=[role],
        avatar=DEFAULT_AVATAR,
        is_enabled=True,
        account_non_expired=True,
        account_non_locked=True,
        credentials_non_expired=True,
    )


def _user_details() -> UserDetails:
    return UserDetails(
        username="testuser",
        password="hashedPassword",
        authorities=("ROLE_OWNER",),
    )


class AuthServiceTestCase(unittest.TestCase):
    """Builds an AuthService over MagicMock collaborators."""

    def setUp(self) -> None:
        self.users = MagicMock()
        self.roles = MagicMock()
        self.hasher = MagicMock()
        self.token_issuer = MagicMock()
        self.mapper = MagicMock()
        self.user_details = MagicMock()
        self.service = AuthService(
            user_repository=self.users,
            role_repository=self.roles,
            password_hasher=self.hasher,
            token_issuer=self.token_issuer,
            user_mapper=self.mapper,
            user_details_service=self.user_details,
            default_owner_avatar=DEFAULT_AVATAR,
        )
        self.request = _registration()
        self.login_request = LoginRequest(username="testuser", password="password123")


class TestRegisterOwner(AuthServiceTestCase):
    """register_owner validates uniqueness, hashes, resolves OWNER and saves once."""

    def test_registers_owner_when_data_is_valid(self) -> None:
        role = _owner_role()
        saved = _saved_owner(role)
        expected = OwnerProfile(
            id=1,
            username="testuser",
            email="test@example.com",
            roles={"OWNER"},
            avatar=DEFAULT_AVATAR,
            phone="123456789",
        )
        self.users.exists_by_email.return_value = False
        self.users.exists_by_username.return_value = False
        self.hasher.encode.return_value = "hashedPassword"
        self.roles.find_by_role_kind.return_value = role
        self.users.save.return_value = saved
        self.mapper.to_owner_profile.return_value = expected

        result = self.service.register_owner(self.request)

        self.assertEqual(result, expected)
        self.users.exists_by_email.assert_called_once_with("test@example.com")
        self.users.exists_by_username.assert_called_once_with("testuser")
        self.hasher.encode.assert_called_once_with("password123")
        self.roles.find_by_role_kind.assert_called_once_with(RoleKind.OWNER)
        self.users.save.assert_called_once()
        self.mapper.to_owner_profile.assert_called_once_with(saved)

        to_save = self.users.save.call_args[0][0]
        self.assertIsInstance(to_save, Owner)
        self.assertEqual(to_save.username, "testuser")
        self.assertEqual(to_save.email, "test@example.com")
        self.assertEqual(to_save.phone, "123456789")
        self.assertEqual(to_save.password_hash, "hashedPassword")
        self.assertNotEqual(to_save.password_hash, "password123")
        self.assertEqual(list(to_save.roles), [role])
        self.assertEqual(to_save.avatar, DEFAULT_AVATAR)
        self.assertTrue(to_save.is_enabled)
        self.assertTrue(to_save.account_non_expired)
        self.assertTrue(to_save.account_non_locked)
        self.assertTrue(to_save.credentials_non_expired)

    def test_uses_injected_default_avatar(self) -> None:
        service = AuthService(
            user_repository=self.users,
            role_repository=self.roles,
            password_hasher=self.hasher,
            token_issuer=self.token_issuer,
            user_mapper=self.mapper,
            user_details_service=self.user_details,
            default_owner_avatar="cdn/avatars/default.svg",
        )
        self.users.exists_by_email.return_value = False
        self.users.exists_by_username.return_value = False
        self.hasher.encode.return_value = "hashedPassword"
        self.roles.find_by_role_kind.return_value = _owner_role()

        service.register_owner(self.request)

        to_save = self.users.save.call_args[0][0]
        self.assertEqual(to_save.avatar, "cdn/avatars/default.svg")

    def test_email_taken_short_circuits(self) -> None:
        self.users.exists_by_email.return_value = True

        with self.assertRaises(EmailAlreadyExistsError) as ctx:
            self.service.register_owner(self.request)

        self.assertIn("test@example.com", str(ctx.exception))
        self.users.exists_by_email.assert_called_once_with("test@example.com")
        self.users.exists_by_username.assert_not_called()
        self.hasher.encode.assert_not_called()
        self.roles.find_by_role_kind.assert_not_called()
        self.users.save.assert_not_called()

    def test_username_taken_short_circuits(self) -> None:
        self.users.exists_by_email.return_value = False
        self.users.exists_by_username.return_value = True

        with self.assertRaises(UsernameAlreadyExistsError) as ctx:
            self.service.register_owner(self.request)

        self.assertIn("testuser", ctx.exception.message)
        self.users.exists_by_email.assert_called_once_with("test@example.com")
        self.users.exists_by_username.assert_called_once_with("testuser")
        self.hasher.encode.assert_not_called()
        self.users.save.assert_not_called()

    def test_missing_owner_role_raises_illegal_state(self) -> None:
        self.users.exists_by_email.return_value = False
        self.users.exists_by_username.return_value = False
        self.hasher.encode.return_value = "hashedPassword"
        self.roles.find_by_role_kind.return_value = None

        with self.assertRaises(IllegalStateError) as ctx:
            self.service.register_owner(self.request)

        self.assertIn("OWNER role not found", str(ctx.exception))
        self.roles.find_by_role_kind.assert_called_once_with(RoleKind.OWNER)
        self.users.save.assert_not_called()
        self.mapper.to_owner_profile.assert_not_called()

    def test_store_conflict_on_save_propagates(self) -> None:
        self.users.exists_by_email.return_value = False
        self.users.exists_by_username.return_value = False
        self.hasher.encode.return_value = "hashedPassword"
        self.roles.find_by_role_kind.return_value = _owner_role()
        self.users.save.side_effect = UsernameAlreadyExistsError("testuser")

        with self.assertRaises(UsernameAlreadyExistsError):
            self.service.register_owner(self.request)
        self.mapper.to_owner_profile.assert_not_called()


class TestLoginUser(AuthServiceTestCase):
    """login_user authenticates, then asks the token issuer for a JWT."""

    def test_returns_jwt_on_successful_login(self) -> None:
        details = _user_details()
        self.user_details.load_user_by_username.return_value = details
        self.hasher.matches.return_value = True
        self.token_issuer.create_token.return_value = "test.jwt.token"

        response = self.service.login_user(self.login_request)

        self.assertEqual(response.username, "testuser")
        self.assertEqual(response.jwt, "test.jwt.token")
        self.assertTrue(response.status)
        self.assertIn("logged successfully", response.message)

        self.user_details.load_user_by_username.assert_called_once_with("testuser")
        self.hasher.matches.assert_called_once_with("password123", "hashedPassword")
        self.token_issuer.create_token.assert_called_once()
        identity = self.token_issuer.create_token.call_args[0][0]
        self.assertIsInstance(identity, AuthenticatedIdentity)
        self.assertEqual(identity.username, "testuser")
        self.assertTrue(identity.authenticated)
        self.assertCountEqual(identity.authorities, details.authorities)

    def test_unknown_username_propagates_not_found(self) -> None:
        self.user_details.load_user_by_username.side_effect = UsernameNotFoundError(
            "User not found"
        )

        with self.assertRaises(UsernameNotFoundError) as ctx:
            self.service.login_user(self.login_request)

        self.assertIn("not found", str(ctx.exception))
        self.hasher.matches.assert_not_called()
        self.token_issuer.create_token.assert_not_called()

    def test_wrong_password_raises_bad_credentials(self) -> None:
        self.user_details.load_user_by_username.return_value = _user_details()
        self.hasher.matches.return_value = False

        with self.assertRaises(BadCredentialsError) as ctx:
            self.service.login_user(self.login_request)

        self.assertIn("Incorrect Password", str(ctx.exception))
        self.hasher.matches.assert_called_once_with("password123", "hashedPassword")
        self.token_issuer.create_token.assert_not_called()


class TestAuthenticate(AuthServiceTestCase):
    """authenticate returns an identity or raises, never issuing tokens itself."""

    def test_returns_authenticated_identity(self) -> None:
        details = UserDetails(
            username="testuser",
            password="hashedPassword",
            authorities=("ROLE_OWNER", "PET_READ_OWN", "PET_CREATE_OWN"),
        )
        self.user_details.load_user_by_username.return_value = details
        self.hasher.matches.return_value = True

        identity = self.service.authenticate("testuser", "password123")

        self.assertEqual(identity.username, "testuser")
        self.assertTrue(identity.authenticated)
        self.assertCountEqual(
            identity.authorities, ["PET_CREATE_OWN", "ROLE_OWNER", "PET_READ_OWN"]
        )
        self.token_issuer.create_token.assert_not_called()

    def test_none_user_details_raises_bad_credentials(self) -> None:
        self.user_details.load_user_by_username.return_value = None

        with self.assertRaises(BadCredentialsError) as ctx:
            self.service.authenticate("testuser", "password123")

        self.assertIn("Invalid username or password", str(ctx.exception))
        self.hasher.matches.assert_not_called()

    def test_wrong_password_raises_bad_credentials(self) -> None:
        self.user_details.load_user_by_username.return_value = _user_details()
        self.hasher.matches.return_value = False

        with self.assertRaises(BadCredentialsError) as ctx:
            self.service.authenticate("testuser", "wrong-password")

        self.assertEqual(ctx.exception.message, "Incorrect Password")

    def test_propagates_username_not_found(self) -> None:
        self.user_details.load_user_by_username.side_effect = UsernameNotFoundError(
            "Test User Not Found"
        )

        with self.assertRaises(UsernameNotFoundError) as ctx:
            self.service.authenticate("testuser", "password123")

        self.assertIn("Test User Not Found", str(ctx.exception))
        self.hasher.matches.assert_not_called()


class TestLoadUserByUsername(AuthServiceTestCase):
    """load_user_by_username delegates to the user details lookup."""

    def test_delegates(self) -> None:
        details = _user_details()
        self.user_details.load_user_by_username.return_value = details

        self.assertIs(self.service.load_user_by_username("testuser"), details)
        self.user_details.load_user_by_username.assert_called_once_with("testuser")


if __name__ == "__main__":
    unittest.main()
