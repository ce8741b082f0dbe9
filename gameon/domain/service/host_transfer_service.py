"""Host transfer domain service."""

from datetime import datetime
from typing import Optional

import logfire

from gameon.domain.error import NotFoundError, NotParticipantError, ValidationError
from gameon.domain.model.game import Game, Participant
from gameon.domain.repository import UserRepository
from gameon.domain.value import GameId, NotificationType, UserId

from .base import Service
from .game_writer import GameWriter
from .guards import require_host, require_open
from .notification_service import NotificationService


class HostTransferService(Service):
    """Hands the host role to a registered player.

    The old host takes the new host's seat as a regular player, so the
    number of occupied seats never changes.
    """

    def __init__(
        self,
        game_writer: GameWriter,
        user_repository: UserRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize host transfer service.

        Args:
            game_writer: Conditional game writer
            user_repository: User repository (old host's profile)
            notification_service: Notification service
        """
        self.game_writer = game_writer
        self.user_repository = user_repository
        self.notification_service = notification_service

    async def transfer_host(
        self,
        game_id: GameId,
        acting_user_id: UserId,
        new_host_id: UserId,
        now: Optional[datetime] = None,
    ) -> Game:
        """Make ``new_host_id`` the host and the caller a player.

        Args:
            game_id: Game ID
            acting_user_id: Current host
            new_host_id: Registered player to promote
            now: Current time

        Returns:
            Updated game

        Raises:
            NotFoundError: If the game or the old host's profile is missing
            NotHostError: If the caller is not the host
            GameCompletedError: If the game is completed
            GameCancelledError: If the game is cancelled
            ValidationError: If the caller names themself
            NotParticipantError: If the new host is not a registered player
        """
        now = now or datetime.now()
        with logfire.span(
            "host_transfer_service.transfer_host",
            game_id=str(game_id),
            acting_user_id=str(acting_user_id),
            new_host_id=str(new_host_id),
        ):
            old_host = await self.user_repository.find_by_id(acting_user_id)

            def swap(game: Game) -> Game:
                require_host(game, acting_user_id, "transfer host ownership")
                require_open(game)
                if new_host_id == acting_user_id:
                    raise ValidationError("You are already the host")
                promoted = game.find_participant(new_host_id)
                if promoted is None:
                    raise NotParticipantError(str(game.id), str(new_host_id))
                if old_host is None:
                    raise NotFoundError("User", str(acting_user_id))

                demoted = Participant(
                    user_id=acting_user_id,
                    profile=old_host.profile_snapshot(),
                    joined_at=now,
                )
                players = [
                    p for p in game.registered_players if p.user_id != new_host_id
                ]
                return game.evolve(
                    host_id=new_host_id,
                    host_whatsapp=promoted.profile.whatsapp,
                    registered_players=[*players, demoted],
                )

            _, game = await self.game_writer.apply(game_id, swap)
            logfire.info(
                "Host transferred",
                game_id=str(game_id),
                old_host_id=str(acting_user_id),
                new_host_id=str(new_host_id),
            )

            old_host_name = old_host.name if old_host else "The host"
            await self.notification_service.notify(
                new_host_id,
                NotificationType.HOST_ASSIGNED,
                "You are now the host!",
                f'{old_host_name} has transferred host ownership of "{game.title}" '
                "to you. You can now manage the game.",
                game_id=game.id,
                related_user_id=acting_user_id,
            )
            return game
