"""Posts listing route."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse

from adapter.identity.request_token_provider import RequestTokenProvider
from adapter.web.notification_buffer import NotificationBuffer
from api.dependencies import get_backend_api, get_notifier
from api.routes.dashboard import SIGN_IN_URL
from api.security import get_token_provider
from api.views import render_posts
from domain.model.errors import DomainError
from port.backend_api import BackendApiPort
from services.post_service import list_posts

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

FETCH_FAILED_MESSAGE = "Failed to fetch posts"


@router.get("", response_class=HTMLResponse)
async def posts_page(
    api: BackendApiPort = Depends(get_backend_api),
    token_provider: RequestTokenProvider = Depends(get_token_provider),
    notifier: NotificationBuffer = Depends(get_notifier),
):
    """Render every post as a card; failures show an empty list and a toast."""
    if not token_provider.operator_id:
        return RedirectResponse(SIGN_IN_URL, status_code=status.HTTP_302_FOUND)

    try:
        posts = await list_posts(api, await token_provider.get_token())
    except DomainError as e:
        logger.error("Error fetching posts", extra={"operatorId": token_provider.operator_id, "error": str(e)})
        notifier.error(FETCH_FAILED_MESSAGE)
        posts = []

    return HTMLResponse(render_posts(posts, notifier.drain()))
