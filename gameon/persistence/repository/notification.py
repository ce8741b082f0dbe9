"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from gameon.domain.model import Notification
from gameon.domain.repository import NotificationRepository
from gameon.domain.value import UserId
from gameon.persistence.mappers import notification_to_dict, row_to_notification
from gameon.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        # Savepoint: a failed delivery must not abort the game transaction
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def find_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 50
    ) -> List[Notification]:
        """Find notifications for a user, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.user_id == user_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.read.is_(False))
        stmt = stmt.order_by(desc(notifications_table.c.created_at)).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]
