"""Post listing service — fetches posts and fills in display defaults."""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from domain.model.errors import AuthError
from domain.model.post import PostRecord
from port.backend_api import BackendApiPort

logger = logging.getLogger(__name__)

UNTITLED = 'Untitled'
NO_CONTENT = 'No content'


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def normalize_post(raw: Mapping[str, Any]) -> PostRecord:
    """Build a PostRecord, substituting defaults for missing fields."""
    return PostRecord(
        id=str(raw.get('_id') or raw.get('id') or ''),
        title=str(raw.get('title') or UNTITLED),
        content=str(raw.get('content') or NO_CONTENT),
        is_public=bool(raw.get('isPublic')),
        created_at=str(raw.get('createdAt') or _now_iso()),
        updated_at=str(raw.get('updatedAt') or _now_iso()),
        style=str(raw.get('style') or ''),
        author=str(raw.get('author') or ''),
        provider_id=str(raw.get('clerkId') or ''),
        uuid=str(raw.get('uuid') or ''),
        public_id=str(raw.get('publicId') or ''),
        version=_as_int(raw.get('__v')),
    )


async def list_posts(api: BackendApiPort, token: str | None) -> list[PostRecord]:
    """Fetch every post visible to the operator.

    Raises:
        AuthError: no token
        HttpError / FormatError / NetworkError: propagated from the API client
    """
    if not token:
        raise AuthError()

    raws = await api.fetch_posts(token)
    posts = [normalize_post(raw) for raw in raws if isinstance(raw, Mapping)]
    logger.info("Posts fetched", extra={"count": len(posts)})
    return posts
