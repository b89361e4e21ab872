"""Admin users service — cached listing of every platform user.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.

Cache strategy:
    hit  → cached JSON text returned untouched
    miss → store query (newest first) → {totalUsers, users} → SETEX 300s
Concurrent misses may both repopulate the entry; the result is the same.
"""

import json
import logging

from domain.model.errors import AuthError, PermissionDeniedError
from port.cache import CachePort
from port.user_store import UserStore

logger = logging.getLogger(__name__)

CACHE_KEY = 'admin:all-users'
CACHE_TTL_SECONDS = 300
ADMIN_ROLE = 'admin'


def authorize_admin(store: UserStore, caller_id: str | None) -> None:
    """Check that the caller exists in the store with the admin role.

    Raises:
        AuthError: no caller identity
        PermissionDeniedError: unknown caller or role other than admin
    """
    if not caller_id:
        raise AuthError("Unauthorized")

    role = store.get_role(caller_id)
    if role is None or role.lower() != ADMIN_ROLE:
        logger.warning("Non-admin requested user list", extra={"userId": caller_id, "role": role})
        raise PermissionDeniedError("Forbidden")


def get_all_users_payload(store: UserStore, cache: CachePort, caller_id: str | None) -> str:
    """Return the serialized user list for an admin caller.

    Returns:
        JSON text of {"totalUsers": int, "users": [...]}
    """
    authorize_admin(store, caller_id)

    cached = cache.get(CACHE_KEY)
    if cached:
        logger.debug("Admin user list served from cache", extra={"userId": caller_id})
        return cached

    users = store.list_users()
    payload = json.dumps({'totalUsers': len(users), 'users': users})
    if not cache.setex(CACHE_KEY, CACHE_TTL_SECONDS, payload):
        logger.warning("Failed to cache admin user list", extra={"cacheKey": CACHE_KEY})

    logger.info("Admin user list loaded from store", extra={"userId": caller_id, "totalUsers": len(users)})
    return payload
