"""FastAPI dependencies wiring ports to adapters.

Everything is resolved from the objects create_app() put on app.state,
so tests can swap any piece through app.dependency_overrides.
"""

from fastapi import Depends, HTTPException, Request
from pymongo.database import Database

from adapter.mongodb.child_repository import MongoChildRepository
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from api.config import Settings
from port.child_repository import ChildRepository
from port.user_repository import UserRepository
from services.password_hasher import PasswordHasher
from services.token_service import TokenService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_db(settings: Settings = Depends(get_app_settings)) -> Database:
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client(settings.mongo_url)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[settings.database_name]


def get_user_repo(db: Database = Depends(get_db)) -> UserRepository:
    return MongoUserRepository(db)


def get_child_repo(db: Database = Depends(get_db)) -> ChildRepository:
    return MongoChildRepository(db)
