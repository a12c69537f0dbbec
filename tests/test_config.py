"""Unit tests for rolegate.core.config: required secret and field validation."""

import os
import tempfile
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from rolegate.core.config import Settings, get_settings
from rolegate.main import create_app

SECRET = "test-secret-0123456789abcdef0123456789"


class TestRequiredSecret(unittest.TestCase):
    """ACCESS_TOKEN_SECRET has no default; absence is fatal."""

    def test_missing_secret_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_secret_raises(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, ACCESS_TOKEN_SECRET="   ")

    def test_secret_read_from_environment(self) -> None:
        with patch.dict(os.environ, {"ACCESS_TOKEN_SECRET": SECRET}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.ACCESS_TOKEN_SECRET.get_secret_value(), SECRET)
        self.assertNotIn(SECRET, repr(settings))

    def test_create_app_refuses_to_start_without_secret(self) -> None:
        get_settings.cache_clear()
        try:
            with tempfile.TemporaryDirectory() as tmp, patch.dict(os.environ, {}, clear=True):
                cwd = os.getcwd()
                os.chdir(tmp)
                try:
                    with self.assertRaises(ValidationError):
                        create_app()
                finally:
                    os.chdir(cwd)
        finally:
            get_settings.cache_clear()


class TestDefaultsAndValidation(unittest.TestCase):
    """Defaults and field validators."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET)
        self.assertEqual(settings.PORT, 3000)
        self.assertEqual(settings.UPLOAD_DIR, "uploads")
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.APP_ENV, "dev")
        self.assertEqual(settings.LOG_LEVEL, "INFO")

    def test_port_out_of_range(self) -> None:
        for port in (0, 70000):
            with self.subTest(port=port):
                with self.assertRaises(ValidationError):
                    Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, PORT=port)

    def test_port_from_environment(self) -> None:
        with patch.dict(os.environ, {"ACCESS_TOKEN_SECRET": SECRET, "PORT": "8080"}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.PORT, 8080)

    def test_algorithm_normalized(self) -> None:
        settings = Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, JWT_ALGORITHM=" hs512 ")
        self.assertEqual(settings.JWT_ALGORITHM, "HS512")

    def test_non_hmac_algorithm_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, JWT_ALGORITHM="RS256")

    def test_log_level(self) -> None:
        settings = Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, LOG_LEVEL="debug")
        self.assertEqual(settings.LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, LOG_LEVEL="loud")


if __name__ == "__main__":
    unittest.main()
