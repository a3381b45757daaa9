"""MongoDB index management.

Each MongoXxxRepository declares its indexes through create_index_safe();
ensure_all_indexes() runs them all once at application startup.
"""

from logging import getLogger

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection: Collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, replacing a conflicting one if needed.

    A conflict is an existing index with our name but other keys, or with
    our keys but another name. Any other PyMongoError propagates.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise
        return _replace_conflicting(collection, keys, name, **kwargs)


def _replace_conflicting(collection: Collection, keys: list, name: str, **kwargs) -> bool:
    wanted = dict(keys)

    for existing_name, info in collection.index_information().items():
        if existing_name == '_id_':
            continue

        existing_keys = dict(info.get('key', []))
        if (existing_name == name) != (existing_keys == wanted):
            logger.warning("Dropping conflicting index", extra={
                "collection": collection.name, "index": existing_name,
            })
            collection.drop_index(existing_name)
            collection.create_index(keys, name=name, **kwargs)
            logger.info("Recreated index", extra={"collection": collection.name, "index": name})
            return True

    logger.error("Failed to resolve index conflict", extra={"collection": collection.name, "index": name})
    return False


def ensure_all_indexes(db: Database) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.child_repository import MongoChildRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
        MongoChildRepository(db).ensure_indexes(),
    ]
    return all(results)
