"""Unit tests for settings validation."""

import unittest

from pydantic import ValidationError

from storefront.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_defaults_from_environment(self) -> None:
        settings = Settings()
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(settings.API_PREFIX, "/api")

    def test_rejects_unsupported_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://localhost/db")

    def test_rejects_empty_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="   ")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)

    def test_port_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(PORT=70000)

    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(Settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")

    def test_api_prefix_trailing_slash_removed(self) -> None:
        self.assertEqual(Settings(API_PREFIX="/api/").API_PREFIX, "/api")


if __name__ == "__main__":
    unittest.main()
