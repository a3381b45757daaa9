"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from domain.model.errors import EmailAlreadyExistsError
from domain.model.user import PROFILE_FIELDS, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        email: str,
        password_hash: str,
        name: str,
        phone: str | None = None,
        address: str | None = None,
    ) -> User:
        # Mirrors the unique email index of the Mongo adapter.
        if any(u.email == email for u in self.store.values()):
            raise EmailAlreadyExistsError("Email already registered")

        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            name=name,
            email=email,
            created_at=now,
            updated_at=now,
            password_hash=password_hash,
            phone=phone,
            address=address,
        )
        self.store[user_id] = user
        return replace(user)

    def update_profile(self, user_id: str, fields: dict) -> User | None:
        user = self.store.get(user_id)
        if not user:
            return None

        for key, value in fields.items():
            if key in PROFILE_FIELDS:
                setattr(user, key, value)
        user.updated_at = datetime.now(timezone.utc)
        return replace(user)

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return replace(user)
        return None

    def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None
