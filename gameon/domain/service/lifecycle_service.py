"""Game lifecycle domain service.

Statuses move ``upcoming -> ongoing -> completed``; ``cancelled`` is
reachable from either pre-completed status. ``ongoing`` is never written
on a schedule: it is derived at read time from the game's start.
"""

import datetime as dt
from datetime import datetime, timedelta
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from gameon.config import GameSettings
from gameon.domain.error import (
    GameCancelledError,
    GameCompletedError,
    InvalidTransitionError,
    ValidationError,
)
from gameon.domain.model.game import DEFAULT_GAME_IMAGE, Game
from gameon.domain.repository import GameRepository
from gameon.domain.value import (
    GameId,
    GameStatus,
    Location,
    NotificationType,
    SkillLevel,
    Sport,
    UserId,
)
from gameon.domain.value.sports import SPORTS

from .base import Service
from .game_writer import GameWriter
from .guards import require_host
from .notification_service import NotificationService

OPEN_STATUSES = (GameStatus.UPCOMING, GameStatus.ONGOING)


def derive_effective_status(game: Game, now: datetime) -> GameStatus:
    """Status as seen at ``now``.

    A stored ``upcoming`` game whose scheduled start has passed reads as
    ``ongoing``; every other status is returned as stored.
    """
    if game.status == GameStatus.UPCOMING and now >= game.scheduled_start:
        return GameStatus.ONGOING
    return game.status


def transition(
    game: Game,
    target: GameStatus,
    now: datetime,
    acting_user_id: Optional[UserId] = None,
) -> Game:
    """Move a game to ``target``, stamping completion or cancellation.

    Raises:
        GameCompletedError: If the game is already completed
        GameCancelledError: If the game is already cancelled
        InvalidTransitionError: If the lifecycle forbids the step
    """
    if game.status == GameStatus.COMPLETED:
        raise GameCompletedError(str(game.id))
    if game.status == GameStatus.CANCELLED:
        raise GameCancelledError(str(game.id))
    if not game.status.can_transition_to(target):
        raise InvalidTransitionError(str(game.id), game.status.value, target.value)

    changes: dict = {"status": target}
    if target == GameStatus.COMPLETED:
        changes.update(completed_at=now, completed_by=acting_user_id)
    elif target == GameStatus.CANCELLED:
        changes.update(cancelled_at=now)
    return game.evolve(**changes)


class LifecycleService(Service):
    """Domain service for creating, reading and cancelling games."""

    def __init__(
        self,
        game_repository: GameRepository,
        game_writer: GameWriter,
        notification_service: NotificationService,
        game_settings: GameSettings,
    ) -> None:
        """Initialize lifecycle service.

        Args:
            game_repository: Game repository
            game_writer: Conditional game writer
            notification_service: Notification service
            game_settings: Scheduling rules
        """
        self.game_repository = game_repository
        self.game_writer = game_writer
        self.notification_service = notification_service
        self.game_settings = game_settings

    async def create_game(
        self,
        host_id: UserId,
        title: str,
        sport: str,
        description: str,
        location: Location,
        date: dt.date,
        start_time: dt.time,
        end_time: dt.time,
        max_players: int,
        skill_level: SkillLevel = SkillLevel.ALL,
        min_skill_level: Optional[SkillLevel] = None,
        image: Optional[str] = None,
        host_whatsapp: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Game:
        """Create a game in ``upcoming`` with the caller as host.

        All validation happens before anything is written.

        Args:
            host_id: Host user ID
            title: Game title
            sport: Sport slug
            description: Game description
            location: Where the game takes place
            date: Game date
            start_time: Start time
            end_time: End time
            max_players: Capacity including the host
            skill_level: Target skill level
            min_skill_level: Minimum skill level, if any
            image: Cover image URL
            host_whatsapp: Host contact shown to players
            now: Current time (defaults to ``datetime.now()``)

        Returns:
            Created game

        Raises:
            ValidationError: If any field is missing or out of range
        """
        now = now or datetime.now()
        with logfire.span(
            "lifecycle_service.create_game", host_id=str(host_id), sport=sport
        ):
            self._validate_schedule(
                title=title,
                sport=sport,
                description=description,
                location=location,
                date=date,
                start_time=start_time,
                end_time=end_time,
                max_players=max_players,
                today=now.date(),
            )

            try:
                game = Game(
                    id=GameId(uuid4()),
                    host_id=host_id,
                    title=title.strip(),
                    sport=Sport(sport),
                    description=description.strip(),
                    location=location,
                    date=date,
                    start_time=start_time,
                    end_time=end_time,
                    max_players=max_players,
                    skill_level=skill_level,
                    min_skill_level=min_skill_level,
                    image=image or DEFAULT_GAME_IMAGE,
                    host_whatsapp=host_whatsapp,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.game_repository.create(game)
            logfire.info("Game created", game_id=str(saved.id), host_id=str(host_id))
            return saved

    async def get_game(self, game_id: GameId) -> Game:
        """Get a game by ID.

        Raises:
            NotFoundError: If the game does not exist
        """
        return await self.game_writer.load(game_id)

    async def list_games(
        self,
        statuses: Optional[Sequence[GameStatus]] = None,
        sport: Optional[str] = None,
        host_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Game]:
        """List games, by default only upcoming and ongoing ones."""
        return await self.game_repository.find_all(
            statuses=statuses if statuses is not None else OPEN_STATUSES,
            sport=sport,
            host_id=host_id,
            limit=limit,
            offset=offset,
        )

    async def cancel_game(
        self,
        game_id: GameId,
        acting_user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Game:
        """Cancel a game. Host only, and never once completed.

        Args:
            game_id: Game ID
            acting_user_id: User cancelling the game
            now: Current time

        Returns:
            Cancelled game

        Raises:
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            GameCompletedError: If the game is completed
            GameCancelledError: If the game is already cancelled
        """
        now = now or datetime.now()
        with logfire.span(
            "lifecycle_service.cancel_game",
            game_id=str(game_id),
            acting_user_id=str(acting_user_id),
        ):

            def cancel(game: Game) -> Game:
                require_host(game, acting_user_id, "cancel the game")
                return transition(game, GameStatus.CANCELLED, now)

            _, cancelled = await self.game_writer.apply(game_id, cancel)
            logfire.info("Game cancelled", game_id=str(game_id))

            await self.notification_service.notify_many(
                [p.user_id for p in cancelled.registered_players],
                NotificationType.GAME_CANCELLED,
                "Game Cancelled",
                f'The game "{cancelled.title}" has been cancelled by the host.',
                game_id=cancelled.id,
                related_user_id=acting_user_id,
            )
            return cancelled

    def _validate_schedule(
        self,
        title: str,
        sport: str,
        description: str,
        location: Location,
        date: dt.date,
        start_time: dt.time,
        end_time: dt.time,
        max_players: int,
        today: dt.date,
    ) -> None:
        missing = [
            name
            for name, value in (
                ("title", title.strip()),
                ("sport", sport),
                ("description", description.strip()),
                ("location", location.address.strip()),
            )
            if not value
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        if sport not in SPORTS:
            raise ValidationError(f"Invalid sport: {sport}")

        if max_players < 2:
            raise ValidationError("maxPlayers must be at least 2")

        earliest = today + timedelta(days=self.game_settings.min_lead_days)
        if date < earliest:
            raise ValidationError(
                f"Game date must be on or after {earliest.isoformat()}"
            )

        if start_time >= end_time:
            raise ValidationError("End time must be after start time")

        minutes = (
            datetime.combine(date, end_time) - datetime.combine(date, start_time)
        ) / timedelta(minutes=1)
        if not (
            self.game_settings.min_duration_minutes
            <= minutes
            <= self.game_settings.max_duration_minutes
        ):
            raise ValidationError(
                f"Game duration must be between "
                f"{self.game_settings.min_duration_minutes} and "
                f"{self.game_settings.max_duration_minutes} minutes"
            )
