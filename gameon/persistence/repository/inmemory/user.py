"""In-memory user repository for testing."""

from datetime import datetime
from typing import Callable, Optional

from gameon.domain.error import NotFoundError
from gameon.domain.model.user import ActivityEntry, RatingReceived, User
from gameon.domain.repository.user import UserRepository
from gameon.domain.value import GameId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user profile, keeping stored stats and activity."""
        existing = self._users.get(user.id)
        if existing is not None:
            user = user.model_copy(
                update={
                    "games_played": existing.games_played,
                    "average_rating": existing.average_rating,
                    "total_ratings": existing.total_ratings,
                    "activity_history": existing.activity_history,
                    "created_at": existing.created_at,
                }
            )
        self._users[user.id] = user
        return user

    async def ensure_activity(self, user_id: UserId, entry: ActivityEntry) -> None:
        """Create the activity entry if missing."""
        user = self._require(user_id)
        if user.activity_for(entry.game_id) is None:
            self._store(user, activity_history=[*user.activity_history, entry])

    async def record_game_played(self, user_id: UserId, entry: ActivityEntry) -> bool:
        """Record a completed game once."""
        user = self._require(user_id)
        if user.activity_for(entry.game_id) is not None:
            return False

        self._store(
            user,
            activity_history=[*user.activity_history, entry],
            games_played=user.games_played + 1,
        )
        return True

    async def add_player_rated(
        self, user_id: UserId, game_id: GameId, rated_user_id: UserId
    ) -> bool:
        """Conditionally append to ``players_rated``."""
        user = self._require(user_id)
        if user.has_rated(game_id, rated_user_id):
            return False

        self._update_entry(
            user,
            game_id,
            lambda e: e.model_copy(
                update={
                    "players_rated": [*e.players_rated, rated_user_id],
                    "rating_given": True,
                }
            ),
        )
        return True

    async def remove_player_rated(
        self, user_id: UserId, game_id: GameId, rated_user_id: UserId
    ) -> None:
        """Undo ``add_player_rated``."""
        user = self._require(user_id)
        self._update_entry(
            user,
            game_id,
            lambda e: e.model_copy(
                update={
                    "players_rated": [
                        uid for uid in e.players_rated if uid != rated_user_id
                    ]
                }
            ),
        )

    async def add_rating_received(
        self, user_id: UserId, game_id: GameId, rating: RatingReceived
    ) -> bool:
        """Conditionally append to ``ratings_received``."""
        user = self._require(user_id)
        if user.has_rating_from(game_id, rating.from_user_id):
            return False

        self._update_entry(
            user,
            game_id,
            lambda e: e.model_copy(
                update={"ratings_received": [*e.ratings_received, rating]}
            ),
        )
        return True

    async def refresh_rating_stats(self, user_id: UserId) -> User:
        """Recompute the average over every rating received."""
        user = self._require(user_id)
        ratings = [
            r.rating for e in user.activity_history for r in e.ratings_received
        ]
        average = sum(ratings) / len(ratings) if ratings else 0.0
        return self._store(user, average_rating=average, total_ratings=len(ratings))

    def _require(self, user_id: UserId) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    def _store(self, user: User, **changes) -> User:
        updated = user.model_copy(update={**changes, "updated_at": datetime.now()})
        self._users[user.id] = updated
        return updated

    def _update_entry(
        self,
        user: User,
        game_id: GameId,
        change: Callable[[ActivityEntry], ActivityEntry],
    ) -> None:
        if user.activity_for(game_id) is None:
            raise NotFoundError("Activity", f"{game_id} for user {user.id}")
        history = [
            change(e) if e.game_id == game_id else e for e in user.activity_history
        ]
        self._store(user, activity_history=history)
