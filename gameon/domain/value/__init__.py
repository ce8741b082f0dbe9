"""Domain value objects for GameOn."""

from gameon.domain.value.identifiers import (
    GameId,
    NotificationId,
    RequestId,
    UserId,
)
from gameon.domain.value.types import (
    AuthenticatedUser,
    Coordinates,
    ErrorKind,
    GameStatus,
    Location,
    NotificationType,
    ProfileSnapshot,
    SkillLevel,
    Sport,
)

__all__ = [
    # Identifiers
    "UserId",
    "GameId",
    "RequestId",
    "NotificationId",
    # Types
    "AuthenticatedUser",
    "Coordinates",
    "ErrorKind",
    "GameStatus",
    "Location",
    "NotificationType",
    "ProfileSnapshot",
    "SkillLevel",
    "Sport",
]
