"""MongoDB implementation of UserStore."""

from datetime import datetime
from logging import getLogger
from typing import Any

from pymongo import DESCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME

logger = getLogger(__name__)

# stored field -> field exposed by the admin users endpoint
PUBLIC_FIELDS = {
    '_id': 'id',
    'email': 'email',
    'first_name': 'firstName',
    'last_name': 'lastName',
    'role': 'role',
    'created_at': 'createdAt',
    'updated_at': 'updatedAt',
}


def _to_json_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if value is not None and not isinstance(value, (str, int, float, bool)):
        return str(value)
    return value


class MongoUserStore:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_public(self, doc: dict) -> dict:
        """Project a stored document onto the public field set."""
        return {public: _to_json_value(doc.get(stored)) for stored, public in PUBLIC_FIELDS.items()}

    def get_role(self, user_id: str) -> str | None:
        try:
            doc = self.collection.find_one({'_id': user_id}, {'role': 1})
        except PyMongoError as e:
            logger.error("Failed to get user role", extra={"userId": user_id, "error": str(e)})
            raise
        if not doc:
            return None
        return doc.get('role') or ''

    def list_users(self) -> list[dict]:
        projection = {field: 1 for field in PUBLIC_FIELDS}
        try:
            cursor = self.collection.find({}, projection).sort('created_at', DESCENDING)
            return [self._to_public(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise
