"""Test environment: settings are read at import time, so set them before app modules load."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-only-signing-secret-0123456789abcdef-0123456789abcdef-0123456789abcdef")
os.environ.setdefault("APP_ENV", "dev")
