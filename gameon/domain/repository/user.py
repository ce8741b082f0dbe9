"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gameon.domain.model.user import ActivityEntry, RatingReceived, User
from gameon.domain.value import GameId, UserId


class UserRepository(ABC):
    """Repository for the User aggregate.

    Rating writes are exposed as single conditional steps so the rating
    saga never has to read-modify-write a whole user.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user profile (create or update).

        Only profile fields are written for an existing user. Rating stats
        and activity history belong to the dedicated methods below.

        Args:
            user: The user to save

        Returns:
            The user as stored
        """
        pass

    @abstractmethod
    async def ensure_activity(self, user_id: UserId, entry: ActivityEntry) -> None:
        """Create the user's activity entry for a game if it is missing.

        Args:
            user_id: Owner of the activity history
            entry: Entry to insert when none exists for ``entry.game_id``
        """
        pass

    @abstractmethod
    async def record_game_played(self, user_id: UserId, entry: ActivityEntry) -> bool:
        """Record a completed game in the user's history.

        Idempotent: ``games_played`` only grows the first time a game is
        recorded.

        Args:
            user_id: The player
            entry: Activity entry for the completed game

        Returns:
            True if the game was newly recorded, False if it already was
        """
        pass

    @abstractmethod
    async def add_player_rated(
        self, user_id: UserId, game_id: GameId, rated_user_id: UserId
    ) -> bool:
        """Append ``rated_user_id`` to the user's ``players_rated`` for a game.

        Also sets ``rating_given`` on the entry.

        Args:
            user_id: The rater
            game_id: The game the rating belongs to
            rated_user_id: The ratee

        Returns:
            True if appended, False if the ratee was already listed
        """
        pass

    @abstractmethod
    async def remove_player_rated(
        self, user_id: UserId, game_id: GameId, rated_user_id: UserId
    ) -> None:
        """Undo ``add_player_rated``.

        Args:
            user_id: The rater
            game_id: The game the rating belongs to
            rated_user_id: The ratee
        """
        pass

    @abstractmethod
    async def add_rating_received(
        self, user_id: UserId, game_id: GameId, rating: RatingReceived
    ) -> bool:
        """Append a rating to the user's ``ratings_received`` for a game.

        Args:
            user_id: The ratee
            game_id: The game the rating belongs to
            rating: The rating to append

        Returns:
            True if appended, False if the rater already rated this user
        """
        pass

    @abstractmethod
    async def refresh_rating_stats(self, user_id: UserId) -> User:
        """Recompute ``average_rating`` and ``total_ratings`` from history.

        Args:
            user_id: The user whose stats should be recomputed

        Returns:
            The updated user

        Raises:
            NotFoundError: If the user does not exist
        """
        pass
