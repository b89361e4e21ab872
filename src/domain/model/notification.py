from dataclasses import dataclass
from enum import Enum


class NotificationLevel(str, Enum):
    SUCCESS = 'success'
    ERROR = 'error'


@dataclass(frozen=True)
class Notification:
    """Transient message shown to the operator (a toast)."""
    level: NotificationLevel
    message: str
