"""Dashboard service — loads, holds and mutates the admin dashboard state.

State machine:
    IDLE ──load()──> LOADING ──all fetches ok──> READY
                        └──any fetch fails──> FAILED

The three backend calls run concurrently and are joined all-or-nothing.
Failures never escape: they are logged, surfaced through the Notifier, and
authorization drops to NOT_ADMIN.

There is no cancellation. A load that finishes after close(), or after a
newer load was started, is discarded without touching state.
"""

import asyncio
import logging
from collections.abc import Callable

from domain.model.dashboard import AuthorizationState, DashboardStats, LoadState, RenderDecision
from domain.model.errors import AuthError, DomainError
from domain.model.user import UserRecord
from port.backend_api import BackendApiPort
from port.notifier import Notifier
from port.token_provider import TokenProvider
from services.authorization import resolve_authorization
from services.table_presenter import TablePage, present_table
from services.user_normalizer import normalize_users

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = 'Failed to fetch dashboard data'
DELETE_FAILED_MESSAGE = 'Failed to delete user'
DELETE_SUCCESS_MESSAGE = 'User deleted successfully'


class Dashboard:
    """View model behind the dashboard page."""

    def __init__(self, api: BackendApiPort, token_provider: TokenProvider, notifier: Notifier):
        self.api = api
        self.token_provider = token_provider
        self.notifier = notifier

        self.state = LoadState.IDLE
        self.authorization = AuthorizationState.UNKNOWN
        self.stats = DashboardStats()
        self.users: list[UserRecord] = []
        self.search_term = ''
        self.page = 1

        self._generation = 0
        self._closed = False

    @property
    def is_signed_in(self) -> bool:
        return bool(self.token_provider.operator_id)

    # ── loading ──────────────────────────────────────────────

    async def load(self) -> LoadState:
        """Fetch counts and users, then resolve the operator's authorization.

        Stays IDLE while no operator is signed in.
        """
        if not self.is_signed_in or self._closed:
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = LoadState.LOADING

        try:
            token = await self._require_token()
            post_count, raw_users, public_posts = await asyncio.gather(
                self.api.fetch_post_count(token),
                self.api.fetch_users(token),
                self.api.fetch_public_post_count(token),
            )
        except DomainError as e:
            if self._is_stale(generation):
                return self.state
            self._fail(e)
            return self.state

        if self._is_stale(generation):
            logger.debug("Discarding stale dashboard load", extra={"generation": generation})
            return self.state

        users = normalize_users(raw_users)
        self.users = users
        self.stats = DashboardStats(
            total_posts=post_count,
            total_users=len(users),
            public_posts=public_posts,
        )
        self.authorization = resolve_authorization(users, self.token_provider.operator_id)
        self.state = LoadState.READY

        logger.info("Dashboard loaded", extra={
            "operatorId": self.token_provider.operator_id,
            "totalUsers": self.stats.total_users,
            "totalPosts": self.stats.total_posts,
            "authorization": self.authorization.value,
        })
        return self.state

    async def retry(self) -> LoadState:
        return await self.load()

    def close(self) -> None:
        """Mark the view as torn down; in-flight results will be dropped."""
        self._closed = True

    def _is_stale(self, generation: int) -> bool:
        return self._closed or generation != self._generation

    def _fail(self, error: Exception) -> None:
        logger.error("Error fetching dashboard data", extra={
            "operatorId": self.token_provider.operator_id,
            "error": str(error),
        })
        self.state = LoadState.FAILED
        self.stats = DashboardStats()
        self.users = []
        self.authorization = AuthorizationState.NOT_ADMIN
        self.notifier.error(str(error) or LOAD_FAILED_MESSAGE)

    async def _require_token(self) -> str:
        token = await self.token_provider.get_token()
        if not token:
            raise AuthError()
        return token

    # ── rendering ────────────────────────────────────────────

    def render_decision(self) -> RenderDecision:
        if not self.is_signed_in:
            return RenderDecision.REDIRECT_SIGN_IN
        if self.state in (LoadState.IDLE, LoadState.LOADING) or self.authorization is AuthorizationState.UNKNOWN:
            return RenderDecision.LOADING
        if self.authorization is not AuthorizationState.ADMIN:
            return RenderDecision.ACCESS_DENIED
        return RenderDecision.DASHBOARD

    def set_search_term(self, term: str) -> None:
        if term != self.search_term:
            self.page = 1
        self.search_term = term

    def set_page(self, page: int) -> None:
        self.page = page

    def table(self) -> TablePage:
        page = present_table(self.users, self.search_term, self.page)
        self.page = page.page
        return page

    # ── mutations ────────────────────────────────────────────

    async def delete_user(self, user_id: str, confirm: Callable[[], bool]) -> bool:
        """Delete a user after the operator confirms.

        Declining issues no request. On success the record is dropped from the
        local list and the user count decremented without refetching; on
        failure the state is left exactly as it was.

        Returns:
            True if the user was deleted.
        """
        if not confirm():
            return False

        try:
            token = await self._require_token()
            await self.api.delete_user(token, user_id)
        except DomainError as e:
            logger.error("Error deleting user", extra={"userId": user_id, "error": str(e)})
            self.notifier.error(str(e) or DELETE_FAILED_MESSAGE)
            return False

        if self._closed:
            return True

        remaining = [user for user in self.users if user.id != user_id]
        removed = len(self.users) - len(remaining)
        self.users = remaining
        self.stats.total_users -= removed

        logger.info("User deleted", extra={"userId": user_id, "removed": removed})
        self.notifier.success(DELETE_SUCCESS_MESSAGE)
        return True
