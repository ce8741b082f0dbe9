"""PostgreSQL implementation of Game repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gameon.domain.error import StaleGameError
from gameon.domain.model import Game
from gameon.domain.repository import GameRepository
from gameon.domain.value import GameId, GameStatus, UserId
from gameon.persistence.mappers import game_to_dict, row_to_game
from gameon.persistence.tables import games_table


class PostgresGameRepository(GameRepository):
    """PostgreSQL implementation of GameRepository.

    The whole aggregate lives on one row; ``update`` is a single
    ``UPDATE ... WHERE version = :expected`` so concurrent writers cannot
    both succeed from the same read.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, game_id: GameId) -> Optional[Game]:
        """Find a game by ID."""
        with logfire.span("game_repository.find_by_id", game_id=str(game_id)):
            stmt = select(games_table).where(games_table.c.id == game_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Game not found", game_id=str(game_id))
                return None
            return row_to_game(row._asdict())

    async def create(self, game: Game) -> Game:
        """Insert a new game."""
        with logfire.span("game_repository.create", game_id=str(game.id)):
            stmt = insert(games_table).values(**game_to_dict(game))
            await self.session.execute(stmt)
            await self.session.flush()
            return game

    async def update(self, game: Game, expected_version: int) -> Game:
        """Write ``game`` only if the stored version still matches."""
        with logfire.span(
            "game_repository.update",
            game_id=str(game.id),
            expected_version=expected_version,
        ):
            values = game_to_dict(game)
            values.pop("id")
            values.pop("created_at")
            values["version"] = expected_version + 1
            values["updated_at"] = datetime.now()

            stmt = (
                update(games_table)
                .where(
                    games_table.c.id == game.id,
                    games_table.c.version == expected_version,
                )
                .values(**values)
                .returning(games_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if not row:
                logfire.info(
                    "Game version check failed",
                    game_id=str(game.id),
                    expected_version=expected_version,
                )
                raise StaleGameError(str(game.id), expected_version)
            return row_to_game(row._asdict())

    async def find_all(
        self,
        statuses: Optional[Sequence[GameStatus]] = None,
        sport: Optional[str] = None,
        host_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Game]:
        """List games with filtering and pagination."""
        with logfire.span(
            "game_repository.find_all",
            sport=sport,
            limit=limit,
            offset=offset,
        ):
            stmt = select(games_table)

            if statuses is not None:
                stmt = stmt.where(
                    games_table.c.status.in_([s.value for s in statuses])
                )
            if sport is not None:
                stmt = stmt.where(games_table.c.sport == sport)
            if host_id is not None:
                stmt = stmt.where(games_table.c.host_id == host_id)

            stmt = (
                stmt.order_by(games_table.c.date, games_table.c.start_time)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            games = [row_to_game(row._asdict()) for row in result.fetchall()]

            logfire.info("Found games", count=len(games))
            return games

    async def find_for_user(
        self, user_id: UserId, statuses: Optional[Sequence[GameStatus]] = None
    ) -> List[Game]:
        """List games the user hosts or plays in, most recent first."""
        with logfire.span("game_repository.find_for_user", user_id=str(user_id)):
            stmt = select(games_table).where(
                or_(
                    games_table.c.host_id == user_id,
                    games_table.c.registered_players.contains(
                        [{"user_id": str(user_id)}]
                    ),
                )
            )
            if statuses is not None:
                stmt = stmt.where(
                    games_table.c.status.in_([s.value for s in statuses])
                )

            stmt = stmt.order_by(
                desc(games_table.c.date), desc(games_table.c.start_time)
            )
            result = await self.session.execute(stmt)
            return [row_to_game(row._asdict()) for row in result.fetchall()]

    async def find_by_requester(self, user_id: UserId) -> List[Game]:
        """List open games with a pending request from the user."""
        with logfire.span(
            "game_repository.find_by_requester", user_id=str(user_id)
        ):
            stmt = (
                select(games_table)
                .where(
                    games_table.c.status.in_(
                        [GameStatus.UPCOMING.value, GameStatus.ONGOING.value]
                    ),
                    games_table.c.join_requests.contains([{"user_id": str(user_id)}]),
                )
                .order_by(games_table.c.date, games_table.c.start_time)
            )
            result = await self.session.execute(stmt)
            return [row_to_game(row._asdict()) for row in result.fetchall()]
