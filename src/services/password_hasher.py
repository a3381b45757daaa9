"""bcrypt password hashing."""

import logging
import secrets
from functools import cached_property

import bcrypt

from domain.model.errors import PasswordHashingError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 12


class PasswordHasher:
    """Salted bcrypt hashing with bcrypt's own constant-time comparison."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt.

        Raises:
            PasswordHashingError: bcrypt rejected the input (e.g. longer than 72 bytes)
        """
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')
        except ValueError as e:
            logger.error("Password hashing failed", extra={"error": str(e)})
            raise PasswordHashingError("Failed to hash password") from e

    def verify(self, password: str, hashed: str) -> bool:
        """True iff password produced hashed. Never raises on bad input."""
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
        except ValueError:
            return False

    @cached_property
    def dummy_hash(self) -> str:
        """Hash of a random secret, used to spend one comparison on unknown emails."""
        return self.hash(secrets.token_urlsafe(16))
