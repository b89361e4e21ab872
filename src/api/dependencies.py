from fastapi import HTTPException

from adapter.external.backend_api import HttpBackendApi
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.user_store import MongoUserStore
from adapter.redis.cache import RedisCacheAdapter
from adapter.web.notification_buffer import NotificationBuffer
from port.backend_api import BackendApiPort
from port.cache import CachePort
from port.user_store import UserStore

# Shared so the Redis connection is cached across requests
_cache = RedisCacheAdapter()


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_store() -> UserStore:
    return MongoUserStore(_get_db())


def get_cache() -> CachePort:
    return _cache


def get_backend_api() -> BackendApiPort:
    return HttpBackendApi()


def get_notifier() -> NotificationBuffer:
    return NotificationBuffer()
