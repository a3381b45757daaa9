"""Port for child data access."""

from datetime import date
from typing import Protocol

from domain.model.child import Child


class ChildRepository(Protocol):
    """Protocol for children owned by a parent user."""

    def create(
        self,
        parent_id: str,
        name: str,
        birth_date: date | None = None,
        notes: str | None = None,
    ) -> Child:
        """Create a child. Raises RepositoryError on store failure."""
        ...

    def get_by_id(self, child_id: str) -> Child | None:
        """Get a single child by ID."""
        ...

    def list_by_parent(self, parent_id: str) -> list[Child]:
        """Get all children of a parent, newest first."""
        ...

    def update(self, child_id: str, fields: dict) -> Child | None:
        """Update name/birth_date/notes. Return the updated Child or None if not found."""
        ...

    def delete(self, child_id: str) -> bool:
        """Delete a child. Return True if something was deleted."""
        ...
