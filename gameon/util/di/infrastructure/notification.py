"""Notification infrastructure providers."""

from dishka import Scope, provide

from gameon.adapter.notification.dispatcher import StoredNotificationDispatcher
from gameon.domain.repository import NotificationRepository
from gameon.domain.service import NotificationDispatcher
from gameon.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification delivery component base."""

    __mock_component__ = "notification"
    # The stored dispatcher writes through NotificationRepository
    __depends_on__ = frozenset({"persistence"})


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider: stores notifications for the inbox."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_dispatcher(
        self, notification_repository: NotificationRepository
    ) -> NotificationDispatcher:
        """Provide notification dispatcher."""
        return StoredNotificationDispatcher(
            notification_repository=notification_repository
        )
