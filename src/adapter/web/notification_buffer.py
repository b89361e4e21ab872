"""Notifier that collects toasts for the page being rendered."""

from domain.model.notification import Notification, NotificationLevel


class NotificationBuffer:
    def __init__(self):
        self.notifications: list[Notification] = []

    def success(self, message: str) -> None:
        self.notifications.append(Notification(NotificationLevel.SUCCESS, message))

    def error(self, message: str) -> None:
        self.notifications.append(Notification(NotificationLevel.ERROR, message))

    def drain(self) -> list[Notification]:
        """Return pending notifications and clear the buffer."""
        pending, self.notifications = self.notifications, []
        return pending
