"""PostgreSQL repository implementations."""

from gameon.persistence.repository.game import PostgresGameRepository
from gameon.persistence.repository.notification import PostgresNotificationRepository
from gameon.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresGameRepository",
    "PostgresNotificationRepository",
    "PostgresUserRepository",
]
