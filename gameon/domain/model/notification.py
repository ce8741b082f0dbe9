"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gameon.domain.model.common import DomainModel
from gameon.domain.value import GameId, NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """A message delivered to one user about a game event."""

    id: NotificationId
    user_id: UserId
    type: NotificationType
    title: str
    message: str
    game_id: Optional[GameId] = None
    related_user_id: Optional[UserId] = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
