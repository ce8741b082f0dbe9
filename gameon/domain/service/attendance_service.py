"""Attendance domain service.

The host confirms who showed up. Once every party (host included) is
marked, the game completes in the same write.
"""

from datetime import datetime
from typing import Optional, Sequence

import logfire

from gameon.config import GameSettings
from gameon.domain.error import (
    AttendanceNotOpenError,
    NotFoundError,
    NotParticipantError,
    ValidationError,
)
from gameon.domain.model.game import AttendanceRecord, Game
from gameon.domain.model.user import ActivityEntry
from gameon.domain.repository import UserRepository
from gameon.domain.value import GameId, GameStatus, NotificationType, UserId

from .base import Service
from .game_writer import GameWriter
from .guards import require_host, require_open
from .lifecycle_service import transition
from .notification_service import NotificationService


class AttendanceService(Service):
    """Domain service for recording attendance and completing games."""

    def __init__(
        self,
        game_writer: GameWriter,
        user_repository: UserRepository,
        notification_service: NotificationService,
        game_settings: GameSettings,
    ) -> None:
        """Initialize attendance service.

        Args:
            game_writer: Conditional game writer
            user_repository: User repository (games played, activity)
            notification_service: Notification service
            game_settings: Game settings (attendance gate)
        """
        self.game_writer = game_writer
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.game_settings = game_settings

    async def mark_attendance(
        self,
        game_id: GameId,
        acting_user_id: UserId,
        player_ids: Optional[Sequence[UserId]] = None,
        mark_all: bool = False,
        now: Optional[datetime] = None,
    ) -> Game:
        """Mark parties as attended and complete the game once all are.

        Marks are monotonic: an ``attended`` record is never reverted.

        Args:
            game_id: Game ID
            acting_user_id: Current host
            player_ids: Parties to mark (host and/or registered players)
            mark_all: Mark the host and every registered player
            now: Current time

        Returns:
            Updated game, ``completed`` if every party has attended

        Raises:
            ValidationError: If neither ``player_ids`` nor ``mark_all`` is given
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            GameCompletedError: If the game is already completed
            GameCancelledError: If the game is cancelled
            AttendanceNotOpenError: If the game has not started yet
            NotParticipantError: If a target is not a party to the game
        """
        now = now or datetime.now()
        if not mark_all and not player_ids:
            raise ValidationError("Provide player_ids or set mark_all")

        with logfire.span(
            "attendance_service.mark_attendance",
            game_id=str(game_id),
            acting_user_id=str(acting_user_id),
            mark_all=mark_all,
        ):

            def mark(game: Game) -> Game:
                require_host(game, acting_user_id, "mark attendance")
                require_open(game)
                if (
                    self.game_settings.attendance_opens_at_start
                    and now < game.scheduled_start
                ):
                    raise AttendanceNotOpenError(
                        str(game.id), game.scheduled_start.isoformat()
                    )

                if mark_all:
                    targets = game.party_ids
                else:
                    targets = list(dict.fromkeys(player_ids or []))
                for user_id in targets:
                    if not game.is_party(user_id):
                        raise NotParticipantError(str(game.id), str(user_id))

                attendance = {a.user_id: a for a in game.attendance}
                for user_id in targets:
                    if not game.has_attended(user_id):
                        attendance[user_id] = AttendanceRecord(
                            user_id=user_id,
                            attended=True,
                            marked_at=now,
                            marked_by=acting_user_id,
                        )

                updated = game.evolve(attendance=list(attendance.values()))
                if updated.everyone_attended:
                    updated = transition(
                        updated, GameStatus.COMPLETED, now, acting_user_id
                    )
                return updated

            before, game = await self.game_writer.apply(game_id, mark)

            newly_marked = [
                uid
                for uid in game.party_ids
                if game.has_attended(uid) and not before.has_attended(uid)
            ]
            logfire.info(
                "Attendance marked",
                game_id=str(game_id),
                marked=len(newly_marked),
                status=game.status.value,
            )

            await self.notification_service.notify_many(
                newly_marked,
                NotificationType.GAME_ATTENDED,
                "Game Attendance Confirmed",
                f'Your attendance for "{game.title}" has been confirmed by the host. '
                "Enjoy your game!",
                game_id=game.id,
                related_user_id=acting_user_id,
            )

            if game.status == GameStatus.COMPLETED:
                await self._on_completed(game, acting_user_id)
            return game

    async def _on_completed(self, game: Game, acting_user_id: UserId) -> None:
        logfire.info(
            "Game completed",
            game_id=str(game.id),
            parties=len(game.party_ids),
        )
        await self.notification_service.notify_many(
            game.party_ids,
            NotificationType.GAME_COMPLETED,
            "Game Completed",
            f'The game "{game.title}" has been completed! '
            "You can now rate other players.",
            game_id=game.id,
            related_user_id=acting_user_id,
        )

        for user_id in game.party_ids:
            entry = ActivityEntry(
                game_id=game.id, sport=game.sport, date=game.date, attended=True
            )
            try:
                await self.user_repository.record_game_played(user_id, entry)
            except NotFoundError:
                logfire.warn(
                    "Completed game for unknown user",
                    game_id=str(game.id),
                    user_id=str(user_id),
                )
