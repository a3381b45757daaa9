"""Application settings.

Read once from the environment (and .env) at startup, then passed around
as an immutable object through FastAPI dependencies.
"""

import os
from datetime import timedelta
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_JWT_EXPIRATION_MINUTES = 7 * 24 * 60


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_name: str = "parentlink API"
    host: str = "0.0.0.0"
    port: int = 8000

    mongo_url: str | None = None
    database_name: str = "parentlink"

    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = Field(DEFAULT_JWT_EXPIRATION_MINUTES, gt=0)
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    # "*" or an explicit list; a regex covers e.g. front-ends on private LAN addresses
    cors_origins: list[str] | str = "*"
    cors_origin_regex: str | None = None

    uploads_dir: str = "uploads"
    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _require_secret(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str) and v.strip() != "*":
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def jwt_expiration(self) -> timedelta:
        return timedelta(minutes=self.jwt_expiration_minutes)

    @property
    def cors_allow_credentials(self) -> bool:
        # Browsers don't support credentials with a wildcard origin
        return self.cors_origins != "*"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (after loading .env)."""
        load_dotenv()
        env = {
            "host": os.getenv("HOST"),
            "port": os.getenv("PORT"),
            "mongo_url": os.getenv("MONGO_URL"),
            "database_name": os.getenv("MONGODB_DATABASE"),
            "jwt_secret_key": os.getenv("JWT_SECRET_KEY", ""),
            "jwt_algorithm": os.getenv("JWT_ALGORITHM"),
            "jwt_expiration_minutes": os.getenv("JWT_EXPIRATION_MINUTES"),
            "bcrypt_rounds": os.getenv("BCRYPT_ROUNDS"),
            "cors_origins": os.getenv("CORS_ORIGINS"),
            "cors_origin_regex": os.getenv("CORS_ORIGIN_REGEX") or None,
            "uploads_dir": os.getenv("UPLOADS_DIR"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in env.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance, loaded on first use."""
    return Settings.from_env()
