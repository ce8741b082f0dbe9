"""Mock persistence providers for testing."""

from dishka import Scope, provide

from gameon.domain.repository import (
    GameRepository,
    NotificationRepository,
    UserRepository,
)
from gameon.persistence.repository.inmemory import (
    InMemoryGameRepository,
    InMemoryNotificationRepository,
    InMemoryUserRepository,
)
from gameon.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_game_repository(self) -> GameRepository:
        """Provide in-memory game repository."""
        return InMemoryGameRepository()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
