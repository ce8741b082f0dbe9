"""In-memory game repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional, Sequence

from gameon.domain.error import StaleGameError
from gameon.domain.model.game import Game
from gameon.domain.repository.game import GameRepository
from gameon.domain.value import GameId, GameStatus, UserId


class InMemoryGameRepository(GameRepository):
    """In-memory implementation of GameRepository for testing."""

    def __init__(self) -> None:
        self._games: dict[GameId, Game] = {}

    async def find_by_id(self, game_id: GameId) -> Optional[Game]:
        """Find a game by ID."""
        game = self._games.get(game_id)
        # Yield like real I/O so concurrent writers interleave after the read
        await asyncio.sleep(0)
        return game

    async def create(self, game: Game) -> Game:
        """Insert a new game."""
        self._games[game.id] = game
        return game

    async def update(self, game: Game, expected_version: int) -> Game:
        """Compare-and-swap on the stored version."""
        current = self._games.get(game.id)
        if current is None or current.version != expected_version:
            raise StaleGameError(str(game.id), expected_version)

        stored = game.model_copy(
            update={"version": expected_version + 1, "updated_at": datetime.now()}
        )
        self._games[game.id] = stored
        return stored

    async def find_all(
        self,
        statuses: Optional[Sequence[GameStatus]] = None,
        sport: Optional[str] = None,
        host_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Game]:
        """List games with filtering and pagination."""
        games = list(self._games.values())

        if statuses is not None:
            games = [g for g in games if g.status in statuses]
        if sport is not None:
            games = [g for g in games if g.sport.root == sport]
        if host_id is not None:
            games = [g for g in games if g.host_id == host_id]

        games.sort(key=lambda g: (g.date, g.start_time))
        return games[offset : offset + limit]

    async def find_for_user(
        self, user_id: UserId, statuses: Optional[Sequence[GameStatus]] = None
    ) -> list[Game]:
        """List games the user hosts or plays in."""
        games = [g for g in self._games.values() if g.is_party(user_id)]
        if statuses is not None:
            games = [g for g in games if g.status in statuses]

        games.sort(key=lambda g: (g.date, g.start_time), reverse=True)
        return games

    async def find_by_requester(self, user_id: UserId) -> list[Game]:
        """List open games with a pending request from the user."""
        games = [
            g
            for g in self._games.values()
            if g.status in (GameStatus.UPCOMING, GameStatus.ONGOING)
            and g.pending_request_for(user_id) is not None
        ]
        games.sort(key=lambda g: (g.date, g.start_time))
        return games
