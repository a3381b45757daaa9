from dataclasses import dataclass
from datetime import datetime

PUBLIC_FIELDS = ('id', 'name', 'email', 'phone', 'address', 'created_at', 'updated_at')
PROFILE_FIELDS = ('name', 'phone', 'address')


def normalize_email(email: str) -> str:
    """Uniqueness key for users: trimmed and lowercased."""
    return email.strip().lower()


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    password_hash: str | None = None
    phone: str | None = None
    address: str | None = None

    def public_profile(self) -> dict:
        """User fields safe to return to clients (never the password hash)."""
        return {f: getattr(self, f) for f in PUBLIC_FIELDS}
