import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from luct.configs.settings import Settings


class TestSettings(unittest.TestCase):
    def test_missing_secrets_refuse_to_load(self):
        env = {k: v for k, v in os.environ.items() if k not in ("DB_PASSWORD", "JWT_SECRET")}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValidationError) as ctx:
                Settings(_env_file=None)
        missing = {error["loc"][0] for error in ctx.exception.errors()}
        self.assertEqual(missing, {"DB_PASSWORD", "JWT_SECRET"})

    def test_database_url_built_from_parts(self):
        env = {k: v for k, v in os.environ.items() if k != "DATABASE_URL"}
        env.update({"DB_PASSWORD": "pw", "JWT_SECRET": "s", "DB_USER": "postgres", "DB_HOST": "db.example",
                    "DB_PORT": "5432", "DB_NAME": "luct"})
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.database_url, "postgresql://postgres:pw@db.example:5432/luct")
        self.assertEqual(settings.ACCESS_TOKEN_EXPIRE_HOURS, 24)
