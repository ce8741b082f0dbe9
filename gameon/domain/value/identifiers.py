"""Strongly typed identifiers for GameOn domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
GameId = NewType("GameId", UUID)
RequestId = NewType("RequestId", UUID)
NotificationId = NewType("NotificationId", UUID)
