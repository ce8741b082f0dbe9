"""In-memory repository implementations for testing."""

from .game import InMemoryGameRepository
from .notification import InMemoryNotificationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryGameRepository",
    "InMemoryNotificationRepository",
    "InMemoryUserRepository",
]
