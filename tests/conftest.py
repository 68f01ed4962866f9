"""
Pytest configuration for the API tests.

Settings refuse to load without the secrets, so they are provided here before
any test module imports the package. The engine URL points at SQLite; each
test case swaps in its own in-memory database through get_db.
"""
import os

os.environ.setdefault("DB_PASSWORD", "test-db-password")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")
