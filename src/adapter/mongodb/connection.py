import logging
import time
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Set pymongo logger to WARNING to reduce noise from driver-level logs
pymongo_logger = logging.getLogger('pymongo')
pymongo_logger.setLevel(logging.WARNING)

USERS_COLLECTION_NAME = 'users'
CHILDREN_COLLECTION_NAME = 'children'

# Minimum seconds between two connection attempts after a failure
RETRY_INTERVAL_SECONDS = 2.0

_client_cache: MongoClient | None = None
_url_missing_logged = False
_last_failure_at: float | None = None


def reset_client():
    global _client_cache, _url_missing_logged, _last_failure_at
    _client_cache = None
    _url_missing_logged = False
    _last_failure_at = None


def get_mongodb_client(mongo_url: str | None) -> MongoClient | None:
    """Get a cached MongoDB client, connecting on first use.

    Connection strategy:
    1. Return the cached client; the driver's own pool handles server
       reconnection, so a later outage fails individual operations only
    2. Otherwise connect and ping once before caching
    3. After a failed attempt, retry on a later call once
       RETRY_INTERVAL_SECONDS have passed
    4. A missing MONGO_URL is a configuration issue and is never retried

    Args:
        mongo_url: Connection string from Settings.mongo_url

    Returns:
        MongoDB client or None if unavailable
    """
    global _client_cache, _url_missing_logged, _last_failure_at

    if _client_cache is not None:
        return _client_cache

    if not mongo_url:
        if not _url_missing_logged:
            logger.error("[MONGODB] MONGO_URL not configured.")
            _url_missing_logged = True
        return None

    now = time.monotonic()
    if _last_failure_at is not None and now - _last_failure_at < RETRY_INTERVAL_SECONDS:
        return None

    try:
        client = MongoClient(
            mongo_url,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            minPoolSize=0,
            maxIdleTimeMS=30000,
            waitQueueTimeoutMS=10000,
            retryWrites=True,
            retryReads=True,
            tz_aware=True,
        )
        client.admin.command('ping')
    except PyMongoError as e:
        # Log once per outage, not on every retry
        if _last_failure_at is None:
            logger.error(f"[MONGODB] Connection failed: {str(e)[:200]}")
        _last_failure_at = now
        return None

    if _last_failure_at is not None:
        logger.info("[MONGODB] Connection recovered")
    else:
        logger.info("[MONGODB] Connected successfully")
    _client_cache = client
    _last_failure_at = None
    return client
