"""Conditional writes against the Game aggregate.

Every game mutation is ``read -> pure transition -> version-checked write``.
When the write loses to a concurrent writer the game is re-read and the
transition re-evaluated, so rules like "a seat must be free" are always
checked against the state that actually gets written.
"""

from typing import Callable

import logfire

from gameon.config import GameSettings
from gameon.domain.error import NotFoundError, StaleGameError
from gameon.domain.model.game import Game
from gameon.domain.repository import GameRepository
from gameon.domain.value import GameId

from .base import Service

GameMutation = Callable[[Game], Game]


class GameWriter(Service):
    """Loads games and applies mutations with optimistic concurrency."""

    def __init__(
        self, game_repository: GameRepository, game_settings: GameSettings
    ) -> None:
        """Initialize game writer.

        Args:
            game_repository: Game repository
            game_settings: Game settings (max write attempts)
        """
        self.game_repository = game_repository
        self.game_settings = game_settings

    async def load(self, game_id: GameId) -> Game:
        """Get a game or raise.

        Args:
            game_id: Game ID

        Returns:
            The game

        Raises:
            NotFoundError: If the game does not exist
        """
        game = await self.game_repository.find_by_id(game_id)
        if game is None:
            raise NotFoundError("Game", str(game_id))
        return game

    async def apply(
        self, game_id: GameId, mutation: GameMutation
    ) -> tuple[Game, Game]:
        """Apply ``mutation`` to the freshest copy of a game.

        ``mutation`` must be pure: it receives the stored game and returns
        the new state (or the same object for a no-op), raising a domain
        error if the change is not allowed. It may run more than once.

        Args:
            game_id: Game ID
            mutation: Transition to apply

        Returns:
            Tuple of (game as read, game as stored)

        Raises:
            NotFoundError: If the game does not exist
            StaleGameError: If every attempt lost to a concurrent writer
            DomainError: Whatever ``mutation`` raises on the latest read
        """
        attempts = self.game_settings.max_write_attempts
        for attempt in range(1, attempts + 1):
            before = await self.load(game_id)
            after = mutation(before)
            if after is before:
                return before, before

            try:
                stored = await self.game_repository.update(after, before.version)
            except StaleGameError:
                logfire.warn(
                    "Game write lost version check",
                    game_id=str(game_id),
                    version=before.version,
                    attempt=attempt,
                )
                if attempt == attempts:
                    raise
                continue

            return before, stored

        # Unreachable: the loop either returns or re-raises
        raise StaleGameError(str(game_id), -1)
