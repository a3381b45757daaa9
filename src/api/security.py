"""Bearer token authentication guard."""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api.dependencies import get_token_service, get_user_repo
from api.models import UserProfile
from domain.model.errors import InvalidTokenError, UnauthorizedError
from port.user_repository import UserRepository
from services.token_service import TokenService

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches us and gets the uniform error body
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """Verify the bearer token and return its subject. Never touches the store."""
    if not credentials:
        raise UnauthorizedError("No token provided")

    try:
        return tokens.verify(credentials.credentials)
    except InvalidTokenError:
        raise UnauthorizedError("Invalid token")


def get_current_user_required(
    user_id: str = Depends(get_current_user_id),
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserProfile:
    """Resolve the authenticated user or reject the request with 401.

    user_id is declared first so FastAPI rejects a missing or bad token
    before the store dependency is opened. The returned profile never
    carries the password hash. A valid token whose user no longer exists
    is rejected as 401, same as a bad token.
    """
    user = user_repo.get_by_id(user_id)
    if not user:
        logger.info("Token references unknown user", extra={"userId": user_id})
        raise UnauthorizedError("User not found")

    return UserProfile(**user.public_profile())
