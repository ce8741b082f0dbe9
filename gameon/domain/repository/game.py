"""Game repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from gameon.domain.model.game import Game
from gameon.domain.value import GameId, GameStatus, UserId


class GameRepository(ABC):
    """Repository for the Game aggregate.

    Every write after creation is conditional on the version the caller
    read, so concurrent writers can never silently overwrite each other.
    """

    @abstractmethod
    async def find_by_id(self, game_id: GameId) -> Optional[Game]:
        """Find a game by ID.

        Args:
            game_id: The game's unique identifier

        Returns:
            The game if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, game: Game) -> Game:
        """Insert a new game.

        Args:
            game: The game to insert (version 0)

        Returns:
            The stored game
        """
        pass

    @abstractmethod
    async def update(self, game: Game, expected_version: int) -> Game:
        """Replace a game if nobody else wrote it since it was read.

        The stored copy gets ``version = expected_version + 1``.

        Args:
            game: The new state of the game
            expected_version: Version the caller's copy was derived from

        Returns:
            The stored game with its new version

        Raises:
            StaleGameError: If the stored version no longer matches
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        statuses: Optional[Sequence[GameStatus]] = None,
        sport: Optional[str] = None,
        host_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Game]:
        """List games, soonest first.

        Args:
            statuses: Only games in one of these statuses
            sport: Only games for this sport slug
            host_id: Only games hosted by this user
            limit: Maximum number of games to return
            offset: Number of games to skip

        Returns:
            List of games ordered by date and start time
        """
        pass

    @abstractmethod
    async def find_for_user(
        self, user_id: UserId, statuses: Optional[Sequence[GameStatus]] = None
    ) -> List[Game]:
        """List games the user hosts or plays in.

        Args:
            user_id: Host or registered player
            statuses: Only games in one of these statuses

        Returns:
            List of games, most recent first
        """
        pass

    @abstractmethod
    async def find_by_requester(self, user_id: UserId) -> List[Game]:
        """List upcoming or ongoing games where the user has a pending request.

        Args:
            user_id: The requester

        Returns:
            List of games ordered by date and start time
        """
        pass
