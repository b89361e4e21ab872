# domain/model/dashboard.py

from dataclasses import dataclass
from enum import Enum


class LoadState(str, Enum):
    """Lifecycle of a dashboard load."""
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


class AuthorizationState(str, Enum):
    """Whether the signed-in operator may see the dashboard."""
    UNKNOWN = 'unknown'
    ADMIN = 'admin'
    NOT_ADMIN = 'not_admin'


class RenderDecision(str, Enum):
    """What the dashboard page should show for the current state."""
    LOADING = 'loading'
    REDIRECT_SIGN_IN = 'redirect_sign_in'
    ACCESS_DENIED = 'access_denied'
    DASHBOARD = 'dashboard'


@dataclass
class DashboardStats:
    """Aggregate counts shown in the dashboard cards. Recomputed each load."""
    total_posts: int = 0
    total_users: int = 0
    public_posts: int = 0
