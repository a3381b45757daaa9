"""Account service — registration, login and profile business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that the API layer maps to HTTP status codes.
"""

import logging
from dataclasses import dataclass

from domain.model.errors import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from domain.model.user import PROFILE_FIELDS, User, normalize_email
from port.user_repository import UserRepository
from services.password_hasher import PasswordHasher
from services.token_service import TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@dataclass
class AuthResult:
    """Token plus the sanitized user it was issued for."""
    token: str
    user: dict


def to_public_profile(user: User) -> dict:
    """Strip everything clients must not see (the password hash)."""
    return user.public_profile()


def register(
    repo: UserRepository,
    hasher: PasswordHasher,
    tokens: TokenService,
    name: str,
    email: str,
    password: str,
    phone: str | None = None,
    address: str | None = None,
) -> AuthResult:
    """Register a new user and issue a token for it.

    Raises:
        EmailAlreadyExistsError: email already registered (pre-check or
            the store's uniqueness constraint on a concurrent insert)
        PasswordHashingError: password could not be hashed
    """
    email = normalize_email(email)
    if repo.get_by_email(email):
        raise EmailAlreadyExistsError("Email already registered")

    password_hash = hasher.hash(password)
    user = repo.create(
        email=email,
        password_hash=password_hash,
        name=name.strip(),
        phone=phone,
        address=address,
    )

    logger.info("User registered", extra={"userId": user.id})
    return AuthResult(token=tokens.issue(user.id), user=to_public_profile(user))


def login(
    repo: UserRepository,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str,
    password: str,
) -> AuthResult:
    """Authenticate a user by email and password.

    Unknown email and wrong password raise the same error, and both
    paths run one bcrypt comparison.

    Raises:
        InvalidCredentialsError: invalid credentials (deliberately vague)
    """
    user = repo.get_by_email(normalize_email(email))
    if not user or not user.password_hash:
        hasher.verify(password, hasher.dummy_hash)
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not hasher.verify(password, user.password_hash):
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    logger.info("User logged in", extra={"userId": user.id})
    return AuthResult(token=tokens.issue(user.id), user=to_public_profile(user))


def get_profile(repo: UserRepository, user_id: str) -> User:
    """Raises UserNotFoundError if the id does not resolve."""
    user = repo.get_by_id(user_id)
    if not user:
        raise UserNotFoundError("User not found")
    return user


def update_profile(repo: UserRepository, user_id: str, patch: dict) -> User:
    """Apply a name/phone/address patch.

    Email and password hash are never touched here, whatever the patch holds.

    Raises:
        UserNotFoundError: the id does not resolve
    """
    fields = {k: v for k, v in patch.items() if k in PROFILE_FIELDS}
    if isinstance(fields.get('name'), str):
        fields['name'] = fields['name'].strip()

    user = repo.update_profile(user_id, fields)
    if not user:
        raise UserNotFoundError("User not found")

    logger.info("Profile updated", extra={"userId": user_id, "fields": sorted(fields)})
    return user
