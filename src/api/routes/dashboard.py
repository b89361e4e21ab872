"""Admin dashboard routes.

This module renders the dashboard and handles user deletion:
- GET /dashboard: stats cards plus the searchable, paginated user table
- POST /dashboard/users/{user_id}/delete: delete a user after confirmation
"""

import logging
import os
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse

from adapter.identity.request_token_provider import RequestTokenProvider
from adapter.web.notification_buffer import NotificationBuffer
from api.dependencies import get_backend_api, get_notifier
from api.security import get_token_provider
from api.views import render_access_denied, render_dashboard, render_loading
from domain.model.dashboard import LoadState, RenderDecision
from domain.model.notification import Notification, NotificationLevel
from port.backend_api import BackendApiPort
from services.dashboard_service import Dashboard

logger = logging.getLogger(__name__)

SIGN_IN_URL = os.getenv("SIGN_IN_URL", "/sign-in")

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard(
    api: BackendApiPort = Depends(get_backend_api),
    token_provider: RequestTokenProvider = Depends(get_token_provider),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> Dashboard:
    return Dashboard(api=api, token_provider=token_provider, notifier=notifier)


def _redirect_to_sign_in() -> RedirectResponse:
    return RedirectResponse(SIGN_IN_URL, status_code=status.HTTP_302_FOUND)


def _pending_notifications(dashboard: Dashboard, notice: str | None, level: str) -> list[Notification]:
    notifications = dashboard.notifier.drain()
    if notice:
        try:
            notice_level = NotificationLevel(level)
        except ValueError:
            notice_level = NotificationLevel.SUCCESS
        notifications.insert(0, Notification(notice_level, notice))
    return notifications


@router.get("", response_class=HTMLResponse)
async def dashboard_page(
    q: str = Query(default="", description="Search by name or email"),
    page: int = Query(default=1, ge=1),
    notice: str | None = Query(default=None, description="Notification carried over a redirect"),
    level: str = Query(default=NotificationLevel.SUCCESS.value),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Render the admin dashboard for the signed-in operator."""
    if not dashboard.is_signed_in:
        return _redirect_to_sign_in()

    try:
        await dashboard.load()
        dashboard.set_search_term(q)
        dashboard.set_page(page)

        decision = dashboard.render_decision()
        notifications = _pending_notifications(dashboard, notice, level)

        if decision is RenderDecision.LOADING:
            return HTMLResponse(render_loading(notifications))
        if decision is RenderDecision.ACCESS_DENIED:
            status_code = (
                status.HTTP_502_BAD_GATEWAY if dashboard.state is LoadState.FAILED
                else status.HTTP_403_FORBIDDEN
            )
            return HTMLResponse(render_access_denied(notifications), status_code=status_code)

        return HTMLResponse(render_dashboard(dashboard.stats, dashboard.table(), dashboard.search_term, notifications))
    finally:
        dashboard.close()


@router.post("/users/{user_id:path}/delete")
async def delete_user(
    user_id: str,
    confirm: str = Query(default="no", description="Operator confirmation, 'yes' to delete"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Delete a user, then redirect back to the dashboard with a notice.

    The backend is only called when the operator confirmed and is an admin.
    """
    if not dashboard.is_signed_in:
        return _redirect_to_sign_in()

    try:
        await dashboard.load()
        if dashboard.render_decision() is not RenderDecision.DASHBOARD:
            notifications = dashboard.notifier.drain()
            return HTMLResponse(render_access_denied(notifications), status_code=status.HTTP_403_FORBIDDEN)

        deleted = await dashboard.delete_user(user_id, confirm=lambda: confirm.lower() == "yes")
        notifications = dashboard.notifier.drain()
    finally:
        dashboard.close()

    query = {}
    if notifications:
        query = {"notice": notifications[-1].message, "level": notifications[-1].level.value}
    logger.info("Delete request handled", extra={"userId": user_id, "deleted": deleted})

    url = "/dashboard" + (f"?{urlencode(query)}" if query else "")
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)
