"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from gameon.config import Settings
from gameon.domain.repository import (
    GameRepository,
    NotificationRepository,
    UserRepository,
)
from gameon.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from gameon.persistence.repository import (
    PostgresGameRepository,
    PostgresNotificationRepository,
    PostgresUserRepository,
)
from gameon.util.di.base import ProviderBase
from gameon.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence: one engine per app, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the instrumented engine, disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request-scoped session, committed when the scope closes cleanly."""
        async with transaction(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_game_repository(self, session: AsyncSession) -> GameRepository:
        return PostgresGameRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        return PostgresNotificationRepository(session)
