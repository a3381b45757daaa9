"""JWT access token issuance and verification."""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from domain.model.errors import InvalidTokenError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION = timedelta(days=7)


class TokenService:
    """Stateless signed bearer tokens carrying a user id.

    There is no revocation list: a token stays valid until it expires or
    the signing key changes.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = JWT_ALGORITHM,
        lifetime: timedelta = JWT_EXPIRATION,
    ):
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, user_id: str) -> str:
        """Create JWT access token for user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Verify JWT token and return the embedded user id.

        Raises:
            InvalidTokenError: bad signature, malformed payload, or now >= exp
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError("Invalid token") from e

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError("Invalid token")

        # jose accepts a token in its exact expiry second; we don't.
        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or exp <= datetime.now(timezone.utc).timestamp():
            raise InvalidTokenError("Token expired")

        return user_id
