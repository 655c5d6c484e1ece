"""Test environment: in-memory SQLite, a fixed signing secret and cheap bcrypt.

Set before any app module is imported, since settings and the engine are
created at import time.
"""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-signing-secret-with-at-least-32-bytes"
os.environ["JWT_EXPIRE_MINUTES"] = "60"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
