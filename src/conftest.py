"""Test-process environment, set before any app module is imported."""

import os
import tempfile

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("UPLOADS_DIR", os.path.join(tempfile.mkdtemp(prefix="parentlink-"), "uploads"))
os.environ.pop("MONGO_URL", None)
