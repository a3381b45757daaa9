"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import get_mongodb_client
from api.config import Settings
from api.dependencies import get_app_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(settings: Settings = Depends(get_app_settings)):
    """Liveness plus MongoDB connectivity.

    Always 200 while the process is up; a broken store only flips
    status to "degraded".
    """
    health_status = {
        "success": True,
        "status": "healthy",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    try:
        mongo_client = get_mongodb_client(settings.mongo_url)
        if mongo_client:
            mongo_client.admin.command('ping')
            health_status["services"]["mongodb"] = {
                "status": "healthy",
                "message": "Connection successful"
            }
        else:
            health_status["services"]["mongodb"] = {
                "status": "unhealthy",
                "message": "Connection failed or not configured"
            }
    except PyMongoError as e:
        health_status["services"]["mongodb"] = {
            "status": "unhealthy",
            "message": f"Connection error: {str(e)[:200]}"
        }

    if health_status["services"]["mongodb"]["status"] != "healthy":
        health_status["status"] = "degraded"
        logger.warning("Health check degraded", extra={"services": health_status["services"]})

    return health_status
