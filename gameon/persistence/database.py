"""Async engine, session factory and per-operation transactions."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gameon.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    SQL echo follows ``settings.debug``; pool sizes come from
    ``settings.database``.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": "gameon"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; repositories flush explicitly and nothing expires on commit."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One session per operation: commit on success, roll back on any error.

    A domain error raised mid-operation therefore leaves no partial writes
    behind, e.g. a rating whose later step failed.

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logfire.warn(
                "Transaction rolled back", error=str(e), error_type=type(e).__name__
            )
            raise
        await session.commit()
