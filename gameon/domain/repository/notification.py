"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from gameon.domain.model.notification import Notification
from gameon.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 50
    ) -> List[Notification]:
        """Find notifications for a user, newest first.

        Args:
            user_id: The recipient
            unread_only: Only return unread notifications
            limit: Maximum number of notifications to return

        Returns:
            List of notifications
        """
        pass
