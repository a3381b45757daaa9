from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Emails passed in are already normalized (see domain.model.user.normalize_email).
    """
    def create(
        self,
        email: str,
        password_hash: str,
        name: str,
        phone: str | None = None,
        address: str | None = None,
    ) -> User:
        """Create a new user.

        Raises EmailAlreadyExistsError when the email uniqueness constraint
        rejects the insert, RepositoryError on any other store failure.
        """
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def update_profile(self, user_id: str, fields: dict) -> User | None:
        """Update name/phone/address. Other keys are ignored.

        Return the updated User or None if not found.
        """
        ...
