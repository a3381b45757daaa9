"""In-memory implementation of ChildRepository for testing."""

import uuid
from dataclasses import replace
from datetime import date, datetime, timezone

from domain.model.child import CHILD_FIELDS, Child


class FakeChildRepository:
    def __init__(self):
        self.store: dict[str, Child] = {}

    def create(
        self,
        parent_id: str,
        name: str,
        birth_date: date | None = None,
        notes: str | None = None,
    ) -> Child:
        now = datetime.now(timezone.utc)
        child = Child(
            id=uuid.uuid4().hex,
            parent_id=parent_id,
            name=name,
            created_at=now,
            updated_at=now,
            birth_date=birth_date,
            notes=notes,
        )
        self.store[child.id] = child
        return replace(child)

    def get_by_id(self, child_id: str) -> Child | None:
        child = self.store.get(child_id)
        return replace(child) if child else None

    def list_by_parent(self, parent_id: str) -> list[Child]:
        children = [replace(c) for c in self.store.values() if c.parent_id == parent_id]
        return sorted(children, key=lambda c: c.created_at, reverse=True)

    def update(self, child_id: str, fields: dict) -> Child | None:
        child = self.store.get(child_id)
        if not child:
            return None
        for key, value in fields.items():
            if key in CHILD_FIELDS:
                setattr(child, key, value)
        child.updated_at = datetime.now(timezone.utc)
        return replace(child)

    def delete(self, child_id: str) -> bool:
        return self.store.pop(child_id, None) is not None
