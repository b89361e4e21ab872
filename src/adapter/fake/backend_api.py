"""In-memory implementation of BackendApiPort for testing."""

import asyncio
from typing import Any

from domain.model.dashboard import DashboardStats
from domain.model.errors import AuthError, DomainError, HttpError


class FakeBackendApi:
    def __init__(
        self,
        users: list[dict[str, Any]] | None = None,
        post_count: int = 0,
        public_post_count: int = 0,
        posts: list[dict[str, Any]] | None = None,
    ):
        self.users = list(users or [])
        self.post_count = post_count
        self.public_post_count = public_post_count
        self.posts = list(posts or [])
        # operation name -> error raised instead of answering
        self.failures: dict[str, DomainError] = {}
        # operation name -> event awaited before answering
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, str | None]] = []

    async def _enter(self, operation: str, token: str, arg: str | None = None) -> None:
        if not token:
            raise AuthError()
        self.calls.append((operation, arg))
        gate = self.gates.get(operation)
        if gate is not None:
            await gate.wait()
        error = self.failures.get(operation)
        if error is not None:
            raise error

    # ── read operations ──────────────────────────────────────

    async def fetch_post_count(self, token: str) -> int:
        await self._enter('fetch_post_count', token)
        return self.post_count

    async def fetch_public_post_count(self, token: str) -> int:
        await self._enter('fetch_public_post_count', token)
        return self.public_post_count

    async def fetch_users(self, token: str) -> list[dict[str, Any]]:
        await self._enter('fetch_users', token)
        return [dict(user) for user in self.users]

    async def fetch_stats(self, token: str) -> DashboardStats:
        await self._enter('fetch_stats', token)
        return DashboardStats(
            total_posts=self.post_count,
            total_users=len(self.users),
            public_posts=self.public_post_count,
        )

    async def fetch_posts(self, token: str) -> list[dict[str, Any]]:
        await self._enter('fetch_posts', token)
        return [dict(post) for post in self.posts]

    # ── write operations ─────────────────────────────────────

    async def delete_user(self, token: str, user_id: str) -> None:
        await self._enter('delete_user', token, user_id)
        remaining = [u for u in self.users if user_id not in _identifiers(u)]
        if len(remaining) == len(self.users):
            raise HttpError(404, "User not found")
        self.users = remaining


def _identifiers(raw: dict[str, Any]) -> set[str]:
    return {str(raw[field]) for field in ('id', '_id', 'userId', 'clerkId') if raw.get(field)}
