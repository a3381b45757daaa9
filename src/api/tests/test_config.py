"""Tests for Settings."""

import os
import unittest
from datetime import timedelta
from unittest.mock import patch

from pydantic import ValidationError

from api.config import Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        settings = Settings(jwt_secret_key="s")

        self.assertEqual(settings.port, 8000)
        self.assertEqual(settings.jwt_algorithm, "HS256")
        self.assertEqual(settings.jwt_expiration, timedelta(days=7))
        self.assertEqual(settings.cors_origins, "*")
        self.assertFalse(settings.cors_allow_credentials)

    def test_secret_is_required(self):
        for secret in ("", "   "):
            with self.subTest(secret=secret):
                with self.assertRaises(ValidationError):
                    Settings(jwt_secret_key=secret)

    def test_settings_are_immutable(self):
        settings = Settings(jwt_secret_key="s")
        with self.assertRaises(ValidationError):
            settings.jwt_secret_key = "other"

    def test_cors_origin_list(self):
        settings = Settings(jwt_secret_key="s", cors_origins="https://a.example, https://b.example ,")

        self.assertEqual(settings.cors_origins, ["https://a.example", "https://b.example"])
        self.assertTrue(settings.cors_allow_credentials)

    @patch("api.config.load_dotenv")
    def test_from_env(self, _mock_load_dotenv):
        env = {
            "JWT_SECRET_KEY": "from-env",
            "PORT": "9001",
            "MONGO_URL": "mongodb://db:27017",
            "MONGODB_DATABASE": "kids",
            "JWT_EXPIRATION_MINUTES": "30",
            "BCRYPT_ROUNDS": "5",
            "CORS_ORIGINS": "http://localhost:3000",
            "CORS_ORIGIN_REGEX": r"^http://192\.168\.\d+\.\d+(:\d+)?$",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.jwt_secret_key, "from-env")
        self.assertEqual(settings.port, 9001)
        self.assertEqual(settings.mongo_url, "mongodb://db:27017")
        self.assertEqual(settings.database_name, "kids")
        self.assertEqual(settings.jwt_expiration, timedelta(minutes=30))
        self.assertEqual(settings.bcrypt_rounds, 5)
        self.assertEqual(settings.cors_origins, ["http://localhost:3000"])
        self.assertTrue(settings.cors_origin_regex.startswith("^http://192"))

    @patch("api.config.load_dotenv")
    def test_from_env_without_secret_fails(self, _mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                Settings.from_env()


if __name__ == '__main__':
    unittest.main()
