"""In-memory notification repository for testing."""

from gameon.domain.model.notification import Notification
from gameon.domain.repository.notification import NotificationRepository
from gameon.domain.value import UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications.append(notification)
        return notification

    async def find_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 50
    ) -> list[Notification]:
        """Find notifications for a user, newest first."""
        found = [
            n
            for n in self._notifications
            if n.user_id == user_id and not (unread_only and n.read)
        ]
        found.sort(key=lambda n: n.created_at, reverse=True)
        return found[:limit]
