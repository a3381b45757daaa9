"""Domain-level exceptions.

Services raise these errors to express business rule violations.
The API layer maps them to HTTP status codes in a single place (api.errors).
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class UserNotFoundError(NotFoundError):
    """User id does not resolve to a stored user."""


class ChildNotFoundError(NotFoundError):
    """Child id does not resolve to a stored child."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class EmailAlreadyExistsError(DuplicateError):
    """A user with the same normalized email is already registered."""


class PermissionDeniedError(DomainError):
    """Caller lacks permission for the requested action."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class InvalidCredentialsError(DomainError):
    """Login failed.

    Raised for both unknown email and wrong password so callers cannot
    tell which registered emails exist.
    """


class UnauthorizedError(DomainError):
    """Request is missing a usable bearer credential."""


class InvalidTokenError(UnauthorizedError):
    """Token signature, payload or expiry check failed."""


class PasswordHashingError(DomainError):
    """Password could not be hashed."""


class RepositoryError(DomainError):
    """Backing store failed while serving a request."""
