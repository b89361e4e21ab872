"""Backend API port — outbound interface for the content platform's REST API."""

from typing import Any, Protocol

from domain.model.dashboard import DashboardStats


class BackendApiPort(Protocol):
    """Port for the admin endpoints of the backend.

    Every operation takes the operator's bearer token first. An empty token
    raises AuthError before any request is made; non-2xx responses raise
    HttpError; unexpected payloads raise FormatError.
    """

    async def fetch_post_count(self, token: str) -> int: ...

    async def fetch_public_post_count(self, token: str) -> int: ...

    async def fetch_users(self, token: str) -> list[dict[str, Any]]:
        """Return raw user objects. Their shape is not uniform across backend versions."""
        ...

    async def delete_user(self, token: str, user_id: str) -> None: ...

    async def fetch_stats(self, token: str) -> DashboardStats:
        """Return all three counts from the combined stats endpoint."""
        ...

    async def fetch_posts(self, token: str) -> list[dict[str, Any]]: ...
