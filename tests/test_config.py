"""Unit tests for app.core.config.Settings validation."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.core.config import Settings

SECRET = "config-test-secret-with-32-bytes-or-more"


def _settings(**overrides: object) -> Settings:
    values = {"JWT_SECRET": SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettingsDefaults(unittest.TestCase):
    """Defaults match the documented configuration."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = _settings()
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 1440)
        self.assertEqual(settings.BCRYPT_ROUNDS, 12)
        self.assertEqual(settings.API_PREFIX, "/api")
        self.assertEqual(settings.SERVER_PORT, 8080)
        self.assertTrue(settings.DATABASE_URL.startswith("postgresql://"))


class TestJwtSecret(unittest.TestCase):
    """The signing secret is required and must be at least 32 bytes."""

    def test_missing_secret(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_short_secret(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="too-short")

    def test_blank_secret(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET=" " * 40)

    def test_secret_is_hidden_in_repr(self) -> None:
        self.assertNotIn(SECRET, repr(_settings()))


class TestOtherValidators(unittest.TestCase):
    """Range and format checks on the remaining settings."""

    def test_database_url_scheme(self) -> None:
        self.assertEqual(_settings(DATABASE_URL=" sqlite:// ").DATABASE_URL, "sqlite://")
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://root@localhost/db")

    def test_token_lifetime_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=10081)

    def test_bcrypt_rounds_bounds(self) -> None:
        self.assertEqual(_settings(BCRYPT_ROUNDS=4).BCRYPT_ROUNDS, 4)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=32)

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            _settings(API_PREFIX="api")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")


if __name__ == "__main__":
    unittest.main()
