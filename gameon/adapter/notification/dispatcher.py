"""Notification dispatchers.

Notifications are delivered by storing them for the user's inbox; push and
email channels read from the same table.
"""

import logfire

from gameon.domain.model.notification import Notification
from gameon.domain.repository import NotificationRepository
from gameon.domain.service.notification_service import NotificationDispatcher


class StoredNotificationDispatcher(NotificationDispatcher):
    """Delivers notifications by persisting them."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize dispatcher.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def dispatch(self, notification: Notification) -> None:
        """Persist the notification for its recipient."""
        await self.notification_repository.save(notification)
        logfire.debug(
            "Notification stored",
            user_id=str(notification.user_id),
            type=notification.type.value,
        )


class RecordingNotificationDispatcher(NotificationDispatcher):
    """Mock dispatcher that keeps notifications in memory.

    Set ``fail_with`` to make every dispatch raise.
    """

    def __init__(self) -> None:
        self.sent: list[Notification] = []
        self.fail_with: Exception | None = None

    async def dispatch(self, notification: Notification) -> None:
        """Record the notification (or raise ``fail_with``)."""
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(notification)
