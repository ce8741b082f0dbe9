"""Rating domain service.

A rating lives on two users: the rater lists the ratee in ``players_rated``
and the ratee holds the rating in ``ratings_received``. The two writes are
not atomic as a pair, so they run as a small saga:

1. conditional rater-side append (fails if already listed)
2. conditional ratee-side append (fails if a rating from the rater exists);
   if this step raises, step 1 is undone so a retry starts clean
3. recompute the ratee's average and count

Both sides are checked for duplicates up front and again by the
conditional writes, which makes a crash-then-retry safe.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from gameon.config import RatingSettings
from gameon.domain.error import (
    DuplicateRatingError,
    GameNotCompletedError,
    NotFoundError,
    NotParticipantError,
    SelfRatingError,
    ValidationError,
)
from gameon.domain.model.game import Game
from gameon.domain.model.user import ActivityEntry, RatingReceived, User
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.value import GameId, GameStatus, UserId

from .base import Service


@dataclass
class RateableGame:
    """A completed game as seen by one of its players."""

    game: Game
    players_rated: list[UserId]


class RatingService(Service):
    """Domain service for peer ratings after a game completes."""

    def __init__(
        self,
        game_repository: GameRepository,
        user_repository: UserRepository,
        rating_settings: RatingSettings,
    ) -> None:
        """Initialize rating service.

        Args:
            game_repository: Game repository
            user_repository: User repository (both sides of a rating)
            rating_settings: Allowed rating range
        """
        self.game_repository = game_repository
        self.user_repository = user_repository
        self.rating_settings = rating_settings

    async def rate_player(
        self,
        game_id: GameId,
        rater_id: UserId,
        ratee_id: UserId,
        rating: int,
        comment: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> User:
        """Record one rating from ``rater_id`` to ``ratee_id`` for a game.

        Args:
            game_id: Completed game
            rater_id: User giving the rating
            ratee_id: User being rated
            rating: Score within the configured range
            comment: Optional free text
            now: Current time

        Returns:
            The ratee with refreshed rating stats

        Raises:
            ValidationError: If the rating is out of range
            NotFoundError: If the game or either user does not exist
            GameNotCompletedError: If the game is not completed
            SelfRatingError: If rater and ratee are the same user
            NotParticipantError: If either user was not host or player
            DuplicateRatingError: If this rating already exists
        """
        now = now or datetime.now()
        low, high = self.rating_settings.min_rating, self.rating_settings.max_rating
        if not low <= rating <= high:
            raise ValidationError(f"Rating must be between {low} and {high}")
        try:
            received = RatingReceived(
                from_user_id=rater_id,
                rating=rating,
                comment=comment or "",
                created_at=now,
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid rating: {e}") from e

        with logfire.span(
            "rating_service.rate_player",
            game_id=str(game_id),
            rater_id=str(rater_id),
            ratee_id=str(ratee_id),
            rating=rating,
        ):
            game = await self.game_repository.find_by_id(game_id)
            if game is None:
                raise NotFoundError("Game", str(game_id))
            if game.status != GameStatus.COMPLETED:
                raise GameNotCompletedError(str(game_id), game.status.value)
            if rater_id == ratee_id:
                raise SelfRatingError()
            for user_id in (rater_id, ratee_id):
                if not game.is_party(user_id):
                    raise NotParticipantError(str(game_id), str(user_id))

            rater = await self._get_user(rater_id)
            ratee = await self._get_user(ratee_id)
            if rater.has_rated(game_id, ratee_id) or ratee.has_rating_from(
                game_id, rater_id
            ):
                logfire.warn(
                    "Duplicate rating attempt",
                    game_id=str(game_id),
                    rater_id=str(rater_id),
                    ratee_id=str(ratee_id),
                )
                raise DuplicateRatingError(str(game_id), str(rater_id), str(ratee_id))

            entry = ActivityEntry(game_id=game.id, sport=game.sport, date=game.date)
            await self.user_repository.ensure_activity(rater_id, entry)
            await self.user_repository.ensure_activity(ratee_id, entry)

            # Step 1: rater side
            if not await self.user_repository.add_player_rated(
                rater_id, game_id, ratee_id
            ):
                raise DuplicateRatingError(str(game_id), str(rater_id), str(ratee_id))

            # Step 2: ratee side
            try:
                added = await self.user_repository.add_rating_received(
                    ratee_id, game_id, received
                )
            except Exception as e:
                logfire.warn(
                    "Ratee-side rating write failed, undoing rater side",
                    game_id=str(game_id),
                    rater_id=str(rater_id),
                    ratee_id=str(ratee_id),
                    error=str(e),
                )
                await self._undo_rater_side(game_id, rater_id, ratee_id, received)
                raise
            if not added:
                # Ratee already holds this rating; the rater side now matches it
                raise DuplicateRatingError(str(game_id), str(rater_id), str(ratee_id))

            # Step 3: stats
            try:
                updated = await self.user_repository.refresh_rating_stats(ratee_id)
            except Exception as e:
                logfire.error(
                    "Rating recorded but ratee stats not refreshed, needs reconciliation",
                    game_id=str(game_id),
                    rater_id=str(rater_id),
                    ratee_id=str(ratee_id),
                    rating=rating,
                    error=str(e),
                )
                raise

            logfire.info(
                "Player rated",
                game_id=str(game_id),
                ratee_id=str(ratee_id),
                average_rating=updated.average_rating,
                total_ratings=updated.total_ratings,
            )
            return updated

    async def list_rateable_games(self, viewer_id: UserId) -> list[RateableGame]:
        """Completed games the viewer took part in, with who they rated.

        Args:
            viewer_id: Host or player of the games

        Returns:
            List of completed games, most recent first
        """
        with logfire.span("rating_service.list_rateable_games", viewer_id=str(viewer_id)):
            games = await self.game_repository.find_for_user(
                viewer_id, statuses=[GameStatus.COMPLETED]
            )
            viewer = await self.user_repository.find_by_id(viewer_id)

            rateable = []
            for game in games:
                entry = viewer.activity_for(game.id) if viewer else None
                rateable.append(
                    RateableGame(
                        game=game,
                        players_rated=list(entry.players_rated) if entry else [],
                    )
                )
            return rateable

    async def _get_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def _undo_rater_side(
        self,
        game_id: GameId,
        rater_id: UserId,
        ratee_id: UserId,
        received: RatingReceived,
    ) -> None:
        try:
            await self.user_repository.remove_player_rated(rater_id, game_id, ratee_id)
        except Exception as e:
            logfire.error(
                "Rating compensation failed, needs reconciliation",
                game_id=str(game_id),
                rater_id=str(rater_id),
                ratee_id=str(ratee_id),
                rating=received.rating,
                comment=received.comment,
                created_at=received.created_at.isoformat(),
                error=str(e),
            )
