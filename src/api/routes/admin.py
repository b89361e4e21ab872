"""Admin API routes.

- GET /api/admin/all-users: every platform user, served from Redis when cached
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response

from api.dependencies import get_cache, get_user_store
from api.models import AdminUsersResponse
from api.security import get_current_operator_id
from domain.model.errors import AuthError, PermissionDeniedError
from port.cache import CachePort
from port.user_store import UserStore
from services.admin_users_service import get_all_users_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get(
    "/all-users",
    responses={
        200: {"model": AdminUsersResponse},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        500: {"description": "Internal Server Error"},
    },
)
def get_all_users(
    operator_id: str | None = Depends(get_current_operator_id),
    store: UserStore = Depends(get_user_store),
    cache: CachePort = Depends(get_cache),
):
    """Get all users, newest first, for an admin caller.

    The payload is cached for 5 minutes and returned exactly as cached.
    """
    try:
        payload = get_all_users_payload(store, cache, operator_id)
    except AuthError:
        return PlainTextResponse("Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)
    except PermissionDeniedError:
        return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)
    except Exception:
        logger.exception("Failed to fetch users", extra={"userId": operator_id})
        return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(content=payload, media_type="application/json")
