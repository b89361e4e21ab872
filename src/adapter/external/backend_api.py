"""Backend REST API adapter.

Implements BackendApiPort over httpx. Every request carries the operator's
bearer token; a missing token fails before anything goes on the wire.

Endpoints (relative to BACKEND_API_URL):
    GET    /admin/all-posts/      -> int
    GET    /admin/public-posts/   -> int
    GET    /admin/all-users       -> [user] or {totalUsers, users}
    DELETE /admin/users/{id}
    GET    /stats                 -> {totalUsers, totalPosts, publicPosts}
    GET    /posts                 -> [post]
"""

import logging
import os
from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.dashboard import DashboardStats
from domain.model.errors import AuthError, FormatError, HttpError, NetworkError

logger = logging.getLogger(__name__)

logging.getLogger('httpx').setLevel(logging.WARNING)

BACKEND_API_URL = os.getenv('BACKEND_API_URL', 'http://localhost:3000/api')
API_TIMEOUT_SECONDS = float(os.getenv('BACKEND_API_TIMEOUT', '10'))


class HttpBackendApi:
    """Adapter that talks to the platform backend's admin endpoints."""

    def __init__(
        self,
        base_url: str = BACKEND_API_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

    # ── BackendApiPort implementation ────────────────────────

    async def fetch_post_count(self, token: str) -> int:
        data = await self._get_json(token, '/admin/all-posts/')
        return _parse_count(data, 'post count')

    async def fetch_public_post_count(self, token: str) -> int:
        data = await self._get_json(token, '/admin/public-posts/')
        return _parse_count(data, 'public post count')

    async def fetch_users(self, token: str) -> list[dict[str, Any]]:
        data = await self._get_json(token, '/admin/all-users')
        if isinstance(data, dict) and isinstance(data.get('users'), list):
            data = data['users']
        if not isinstance(data, list):
            logger.error("Unexpected user list response", extra={"type": type(data).__name__})
            raise FormatError("Invalid response format")
        return data

    async def delete_user(self, token: str, user_id: str) -> None:
        await self._request(token, 'DELETE', f"/admin/users/{quote(user_id, safe='')}")
        logger.info("User deleted via backend", extra={"userId": user_id})

    async def fetch_stats(self, token: str) -> DashboardStats:
        data = await self._get_json(token, '/stats')
        if not isinstance(data, dict):
            raise FormatError("Invalid response format")
        return DashboardStats(
            total_posts=_parse_count(data.get('totalPosts'), 'totalPosts'),
            total_users=_parse_count(data.get('totalUsers'), 'totalUsers'),
            public_posts=_parse_count(data.get('publicPosts'), 'publicPosts'),
        )

    async def fetch_posts(self, token: str) -> list[dict[str, Any]]:
        data = await self._get_json(token, '/posts')
        if not isinstance(data, list):
            logger.error("Expected array of posts", extra={"type": type(data).__name__})
            raise FormatError("Invalid response format")
        return data

    # ── HTTP helpers ─────────────────────────────────────────

    async def _get_json(self, token: str, path: str) -> Any:
        response = await self._request(token, 'GET', path)
        try:
            return response.json()
        except ValueError as e:
            raise FormatError(f"Invalid JSON from {path}") from e

    async def _request(self, token: str, method: str, path: str) -> httpx.Response:
        if not token:
            raise AuthError()

        url = f"{self.base_url}{path}"
        headers = {
            'Content-Type': 'application/json',
            'Authorization': f"Bearer {token}",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                if method == 'GET':
                    response = await _get_with_retry(client, url, headers)
                else:
                    response = await client.request(method, url, headers=headers)
        except httpx.DecodingError as e:
            logger.error("Undecodable backend response", extra={"method": method, "path": path, "error": str(e)})
            raise FormatError(f"Undecodable response from {path}") from e
        except httpx.RequestError as e:
            logger.error("Backend unreachable", extra={"method": method, "path": path, "error": str(e)})
            raise NetworkError(f"Backend unreachable: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning("Backend request failed", extra={
                "method": method, "path": path, "status": response.status_code, "error": message,
            })
            raise HttpError(response.status_code, message)

        return response


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _get_with_retry(client: httpx.AsyncClient, url: str, headers: dict) -> httpx.Response:
    """GET with automatic retry on transient failures. Non-idempotent calls never go through here."""
    return await client.get(url, headers=headers)


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get('message') or body.get('detail')
        if isinstance(message, str):
            return message
    return None


def _parse_count(data: Any, label: str) -> int:
    """Accept an integer or a numeric string; anything else is a format error."""
    if isinstance(data, bool):
        raise FormatError(f"Unexpected {label}: {data!r}")
    if isinstance(data, int):
        return data
    if isinstance(data, float) and data.is_integer():
        return int(data)
    if isinstance(data, str) and data.strip().isdigit():
        return int(data.strip())
    raise FormatError(f"Unexpected {label}: {data!r}")
