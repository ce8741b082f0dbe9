"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gameon.domain.error import NotFoundError
from gameon.domain.model import ActivityEntry, RatingReceived, User
from gameon.domain.repository import UserRepository
from gameon.domain.value import GameId, UserId
from gameon.persistence.mappers import (
    activity_entry_to_dict,
    row_to_activity_entry,
    row_to_user,
    user_to_dict,
)
from gameon.persistence.tables import (
    activity_players_rated_table,
    activity_ratings_received_table,
    user_activity_table,
    users_table,
)

# Columns a profile save never overwrites: identity, and the rating stats
# owned by record_game_played and refresh_rating_stats
PROFILE_IMMUTABLE = frozenset(
    {"id", "created_at", "games_played", "average_rating", "total_ratings"}
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Each rating step is one ``INSERT ... ON CONFLICT DO NOTHING RETURNING``
    against a table keyed by (user, game, other user), so the database's
    primary key is the duplicate check.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, with their full activity history."""
        with logfire.span("user_repository.find_by_id", user_id=str(user_id)):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("User not found", user_id=str(user_id))
                return None

            history = await self._fetch_activity(user_id)
            return row_to_user(row._asdict(), activity_history=history)

    async def save(self, user: User) -> User:
        """Save or update a user profile (activity is written separately)."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            values = user_to_dict(user)
            stmt = insert(users_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in values.items() if k not in PROFILE_IMMUTABLE},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return await self.find_by_id(user.id)

    async def ensure_activity(self, user_id: UserId, entry: ActivityEntry) -> None:
        """Create the activity entry if missing."""
        await self._require_exists(user_id)
        await self._insert_activity(user_id, entry)

    async def record_game_played(self, user_id: UserId, entry: ActivityEntry) -> bool:
        """Record a completed game once, bumping ``games_played``."""
        with logfire.span(
            "user_repository.record_game_played",
            user_id=str(user_id),
            game_id=str(entry.game_id),
        ):
            await self._require_exists(user_id)
            if not await self._insert_activity(user_id, entry):
                return False

            stmt = (
                update(users_table)
                .where(users_table.c.id == user_id)
                .values(
                    games_played=users_table.c.games_played + 1,
                    updated_at=datetime.now(),
                )
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return True

    async def add_player_rated(
        self, user_id: UserId, game_id: GameId, rated_user_id: UserId
    ) -> bool:
        """Conditionally insert the rater-side row."""
        with logfire.span(
            "user_repository.add_player_rated",
            user_id=str(user_id),
            game_id=str(game_id),
            rated_user_id=str(rated_user_id),
        ):
            stmt = (
                insert(activity_players_rated_table)
                .values(user_id=user_id, game_id=game_id, rated_user_id=rated_user_id)
                .on_conflict_do_nothing()
                .returning(activity_players_rated_table.c.rated_user_id)
            )
            result = await self.session.execute(stmt)
            if result.fetchone() is None:
                return False

            await self.session.execute(
                update(user_activity_table)
                .where(
                    user_activity_table.c.user_id == user_id,
                    user_activity_table.c.game_id == game_id,
                )
                .values(rating_given=True)
            )
            await self.session.flush()
            return True

    async def remove_player_rated(
        self, user_id: UserId, game_id: GameId, rated_user_id: UserId
    ) -> None:
        """Delete the rater-side row."""
        stmt = delete(activity_players_rated_table).where(
            and_(
                activity_players_rated_table.c.user_id == user_id,
                activity_players_rated_table.c.game_id == game_id,
                activity_players_rated_table.c.rated_user_id == rated_user_id,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def add_rating_received(
        self, user_id: UserId, game_id: GameId, rating: RatingReceived
    ) -> bool:
        """Conditionally insert the ratee-side row."""
        with logfire.span(
            "user_repository.add_rating_received",
            user_id=str(user_id),
            game_id=str(game_id),
            from_user_id=str(rating.from_user_id),
        ):
            stmt = (
                insert(activity_ratings_received_table)
                .values(
                    user_id=user_id,
                    game_id=game_id,
                    from_user_id=rating.from_user_id,
                    rating=rating.rating,
                    comment=rating.comment,
                    created_at=rating.created_at,
                )
                .on_conflict_do_nothing()
                .returning(activity_ratings_received_table.c.from_user_id)
            )
            # Savepoint: a failed insert leaves the rater side undoable
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                inserted = result.fetchone() is not None
            return inserted

    async def refresh_rating_stats(self, user_id: UserId) -> User:
        """Recompute the average over every rating received in one UPDATE."""
        with logfire.span(
            "user_repository.refresh_rating_stats", user_id=str(user_id)
        ):
            received = activity_ratings_received_table
            average = (
                select(func.coalesce(func.avg(received.c.rating), 0))
                .where(received.c.user_id == user_id)
                .scalar_subquery()
            )
            count = (
                select(func.count())
                .select_from(received)
                .where(received.c.user_id == user_id)
                .scalar_subquery()
            )
            stmt = (
                update(users_table)
                .where(users_table.c.id == user_id)
                .values(
                    average_rating=average,
                    total_ratings=count,
                    updated_at=datetime.now(),
                )
                .returning(users_table.c.id)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            if result.fetchone() is None:
                raise NotFoundError("User", str(user_id))

            user = await self.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User", str(user_id))
            return user

    async def _require_exists(self, user_id: UserId) -> None:
        stmt = select(users_table.c.id).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("User", str(user_id))

    async def _insert_activity(self, user_id: UserId, entry: ActivityEntry) -> bool:
        stmt = (
            insert(user_activity_table)
            .values(**activity_entry_to_dict(user_id, entry))
            .on_conflict_do_nothing()
            .returning(user_activity_table.c.game_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.fetchone() is not None

    async def _fetch_activity(self, user_id: UserId) -> List[ActivityEntry]:
        """Assemble activity entries from the three activity tables."""
        activity = await self.session.execute(
            select(user_activity_table)
            .where(user_activity_table.c.user_id == user_id)
            .order_by(user_activity_table.c.created_at)
        )
        rated = await self.session.execute(
            select(activity_players_rated_table)
            .where(activity_players_rated_table.c.user_id == user_id)
            .order_by(activity_players_rated_table.c.created_at)
        )
        received = await self.session.execute(
            select(activity_ratings_received_table)
            .where(activity_ratings_received_table.c.user_id == user_id)
            .order_by(activity_ratings_received_table.c.created_at)
        )

        rated_by_game: Dict[UUID, List[UUID]] = defaultdict(list)
        for row in rated.fetchall():
            rated_by_game[row.game_id].append(row.rated_user_id)
        received_by_game: Dict[UUID, List[Dict[str, Any]]] = defaultdict(list)
        for row in received.fetchall():
            received_by_game[row.game_id].append(row._asdict())

        return [
            row_to_activity_entry(
                row._asdict(),
                players_rated=rated_by_game.get(row.game_id, []),
                ratings_received=received_by_game.get(row.game_id, []),
            )
            for row in activity.fetchall()
        ]
