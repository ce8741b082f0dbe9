"""Domain model entities for GameOn."""

from gameon.domain.model.game import (
    AttendanceRecord,
    Game,
    JoinRequest,
    Participant,
)
from gameon.domain.model.notification import Notification
from gameon.domain.model.user import ActivityEntry, RatingReceived, User

__all__ = [
    "Game",
    "Participant",
    "JoinRequest",
    "AttendanceRecord",
    "User",
    "ActivityEntry",
    "RatingReceived",
    "Notification",
]
