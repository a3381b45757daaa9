"""MongoDB implementation of ChildRepository."""

import uuid
from datetime import date, datetime, timezone
from logging import getLogger

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import CHILDREN_COLLECTION_NAME
from domain.model.child import CHILD_FIELDS, Child
from domain.model.errors import RepositoryError

logger = getLogger(__name__)


def _date_to_bson(value: date | None) -> datetime | None:
    # BSON has no date-only type; store midnight UTC.
    if value is None:
        return None
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


class MongoChildRepository:
    def __init__(self, db: Database):
        self.collection = db[CHILDREN_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for children collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(
                self.collection,
                [('parent_id', 1), ('created_at', -1)],
                'idx_children_parent_created',
            )
            return True
        except PyMongoError as e:
            logger.error("Failed to create children indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> Child:
        birth = doc.get('birth_date')
        return Child(
            id=doc['_id'],
            parent_id=doc['parent_id'],
            name=doc['name'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            birth_date=birth.date() if birth else None,
            notes=doc.get('notes'),
        )

    def create(
        self,
        parent_id: str,
        name: str,
        birth_date: date | None = None,
        notes: str | None = None,
    ) -> Child:
        child_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        doc = {
            '_id': child_id,
            'parent_id': parent_id,
            'name': name,
            'birth_date': _date_to_bson(birth_date),
            'notes': notes,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to create child", extra={"parentId": parent_id, "error": str(e)})
            raise RepositoryError("Failed to create child") from e
        return self._to_domain(doc)

    def get_by_id(self, child_id: str) -> Child | None:
        try:
            doc = self.collection.find_one({'_id': child_id})
        except PyMongoError as e:
            logger.error("Failed to get child", extra={"childId": child_id, "error": str(e)})
            raise RepositoryError("Failed to load child") from e
        return self._to_domain(doc) if doc else None

    def list_by_parent(self, parent_id: str) -> list[Child]:
        try:
            cursor = self.collection.find({'parent_id': parent_id}).sort('created_at', DESCENDING)
            return [self._to_domain(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error("Failed to list children", extra={"parentId": parent_id, "error": str(e)})
            raise RepositoryError("Failed to list children") from e

    def update(self, child_id: str, fields: dict) -> Child | None:
        update = {k: v for k, v in fields.items() if k in CHILD_FIELDS}
        if 'birth_date' in update:
            update['birth_date'] = _date_to_bson(update['birth_date'])
        update['updated_at'] = datetime.now(timezone.utc)
        try:
            doc = self.collection.find_one_and_update(
                {'_id': child_id},
                {'$set': update},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Failed to update child", extra={"childId": child_id, "error": str(e)})
            raise RepositoryError("Failed to update child") from e
        return self._to_domain(doc) if doc else None

    def delete(self, child_id: str) -> bool:
        try:
            result = self.collection.delete_one({'_id': child_id})
        except PyMongoError as e:
            logger.error("Failed to delete child", extra={"childId": child_id, "error": str(e)})
            raise RepositoryError("Failed to delete child") from e
        return result.deleted_count > 0
