from dataclasses import dataclass
from datetime import date, datetime

from domain.model.errors import PermissionDeniedError

CHILD_FIELDS = ('name', 'birth_date', 'notes')


@dataclass
class Child:
    """Domain model representing a child registered by a parent user."""
    id: str
    parent_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    birth_date: date | None = None
    notes: str | None = None

    def check_ownership(self, user_id: str) -> None:
        """Verify ownership. Raises PermissionDeniedError on mismatch."""
        if self.parent_id != user_id:
            raise PermissionDeniedError("Not authorized to access this child")
