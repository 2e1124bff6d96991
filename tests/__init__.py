"""Test package. Settings are read at import time, so test env vars are set here first."""

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-with-at-least-32-bytes!!")
os.environ.setdefault("JWT_EXPIRE_MINUTES", "60")
