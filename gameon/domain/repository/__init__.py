"""Repository interfaces for GameOn domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from gameon.domain.repository.game import GameRepository
from gameon.domain.repository.notification import NotificationRepository
from gameon.domain.repository.user import UserRepository

__all__ = [
    "GameRepository",
    "UserRepository",
    "NotificationRepository",
]
