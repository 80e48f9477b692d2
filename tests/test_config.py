"""Unit tests for petconnect.core.config validation."""

import unittest

from pydantic import ValidationError

from petconnect.core.config import Settings


def _settings(**kwargs: object) -> Settings:
    # _env_file=None keeps a developer's local .env out of the assertions.
    return Settings(_env_file=None, **kwargs)


class TestDefaults(unittest.TestCase):
    def test_defaults_are_valid(self) -> None:
        settings = _settings()
        self.assertEqual(settings.DEFAULT_OWNER_AVATAR, "images/avatars/users/owner.png")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 480)
        self.assertEqual(settings.PASSWORD_RESET_EXPIRE_HOURS, 1)
        self.assertIsNone(settings.EMAIL_API_URL)


class TestValidators(unittest.TestCase):
    def test_rejects_non_postgres_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://localhost/petconnect")

    def test_rejects_empty_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_rejects_blank_issuer(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ISSUER="")

    def test_jwt_expire_minutes_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=10081)

    def test_rejects_blank_default_avatar(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DEFAULT_OWNER_AVATAR=" ")

    def test_frontend_url_trailing_slash_stripped(self) -> None:
        settings = _settings(FRONTEND_BASE_URL="https://app.petconnect.test/")
        self.assertEqual(settings.FRONTEND_BASE_URL, "https://app.petconnect.test")

    def test_frontend_url_requires_http(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(FRONTEND_BASE_URL="ftp://app.petconnect.test")

    def test_blank_email_api_url_becomes_none(self) -> None:
        self.assertIsNone(_settings(EMAIL_API_URL="  ").EMAIL_API_URL)

    def test_email_api_url_requires_http(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(EMAIL_API_URL="smtp://mail.test")


if __name__ == "__main__":
    unittest.main()
