"""FastAPI application entry point."""

import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.indexes import ensure_all_indexes
from api.config import Settings, get_settings
from api.errors import register_exception_handlers
from api.middleware.request_logging import log_requests
from api.routes import children, health, users
from services.password_hasher import PasswordHasher
from services.token_service import TokenService
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = Path(__file__).parent.parent.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: ensure MongoDB indexes on startup."""
    settings: Settings = app.state.settings
    client = get_mongodb_client(settings.mongo_url)
    if client:
        if ensure_all_indexes(client[settings.database_name]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    if settings.cors_origins == "*":
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
        )
    else:
        logger.info("CORS configured with specific origins", extra={
            "origins": settings.cors_origins,
            "originRegex": settings.cors_origin_regex,
        })

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one immutable Settings object."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.service_name,
        description="Accounts and children API",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        lifetime=settings.jwt_expiration,
    )

    _configure_cors(app, settings)
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(children.router)
    app.include_router(health.router)

    # StaticFiles requires an existing directory
    Path(settings.uploads_dir).mkdir(parents=True, exist_ok=True)
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.uploads_dir),
        name="uploads",
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": settings.service_name,
            "version": VERSION,
            "status": "running"
        }

    return app


setup_structured_logging(get_settings().log_level)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = get_settings()
    # Requests are logged by log_requests; uvicorn's access log would duplicate them
    uvicorn.run(
        app,
        host=_settings.host,
        port=_settings.port,
        access_log=False
    )
