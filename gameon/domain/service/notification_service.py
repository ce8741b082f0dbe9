"""Notification domain service."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

import logfire

from gameon.domain.model.notification import Notification
from gameon.domain.value import GameId, NotificationId, NotificationType, UserId

from .base import Service


class NotificationDispatcher(ABC):
    """Delivers notifications to users (store, push, email...)."""

    @abstractmethod
    async def dispatch(self, notification: Notification) -> None:
        """Deliver one notification.

        Args:
            notification: The notification to deliver
        """
        pass


class NotificationService(Service):
    """Fire-and-forget notifications for game events.

    Delivery failures are logged and never fail the calling operation.
    """

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        """Initialize notification service.

        Args:
            dispatcher: Notification dispatcher
        """
        self.dispatcher = dispatcher

    async def notify(
        self,
        user_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        game_id: Optional[GameId] = None,
        related_user_id: Optional[UserId] = None,
    ) -> None:
        """Send one notification.

        Args:
            user_id: Recipient
            type: Notification type
            title: Short title
            message: Message body
            game_id: Game the notification is about
            related_user_id: User who caused the event
        """
        notification = Notification(
            id=NotificationId(uuid4()),
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            game_id=game_id,
            related_user_id=related_user_id,
            created_at=datetime.now(),
        )
        try:
            await self.dispatcher.dispatch(notification)
        except Exception as e:
            logfire.error(
                "Notification dispatch failed",
                user_id=str(user_id),
                type=type.value,
                game_id=str(game_id) if game_id else None,
                error=str(e),
            )

    async def notify_many(
        self,
        user_ids: Iterable[UserId],
        type: NotificationType,
        title: str,
        message: str,
        game_id: Optional[GameId] = None,
        related_user_id: Optional[UserId] = None,
    ) -> None:
        """Send the same notification to several users."""
        for user_id in user_ids:
            await self.notify(
                user_id,
                type,
                title,
                message,
                game_id=game_id,
                related_user_id=related_user_id,
            )
