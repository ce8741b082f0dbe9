"""Roster domain service.

Owns the seats of a game: pending join requests, registered players and the
derived seat count. Seats are claimed on accept, never on request. The
free-seat check runs against the copy being written, so concurrent accepts
cannot overfill a game.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from gameon.domain.error import (
    AlreadyMemberError,
    GameFullError,
    GameNotJoinableError,
    LastHostWithPlayersError,
    NotFoundError,
    NotParticipantError,
    SeatTakenError,
)
from gameon.domain.model.game import Game, JoinRequest, Participant
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.value import (
    GameId,
    GameStatus,
    NotificationType,
    ProfileSnapshot,
    RequestId,
    UserId,
)

from .base import Service
from .game_writer import GameWriter
from .guards import require_host, require_open
from .lifecycle_service import transition
from .notification_service import NotificationService


class RosterService(Service):
    """Domain service for join requests and the player roster."""

    def __init__(
        self,
        game_writer: GameWriter,
        game_repository: GameRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize roster service.

        Args:
            game_writer: Conditional game writer
            game_repository: Game repository (read-only queries)
            user_repository: User repository (profile snapshots)
            notification_service: Notification service
        """
        self.game_writer = game_writer
        self.game_repository = game_repository
        self.user_repository = user_repository
        self.notification_service = notification_service

    async def request_join(
        self,
        game_id: GameId,
        user_id: UserId,
        profile: Optional[ProfileSnapshot] = None,
        now: Optional[datetime] = None,
    ) -> JoinRequest:
        """Ask to join a game. Does not consume a seat.

        Args:
            game_id: Game ID
            user_id: Requesting user
            profile: Display fields to snapshot; read from the user store
                when omitted
            now: Current time

        Returns:
            The pending join request

        Raises:
            NotFoundError: If the game (or user, when no profile is given)
                does not exist
            AlreadyMemberError: If the user hosts, plays in or already asked
                to join the game
            GameNotJoinableError: If the game is not upcoming
            GameFullError: If no seats are left
        """
        now = now or datetime.now()
        with logfire.span(
            "roster_service.request_join", game_id=str(game_id), user_id=str(user_id)
        ):
            if profile is None:
                user = await self.user_repository.find_by_id(user_id)
                if user is None:
                    raise NotFoundError("User", str(user_id))
                profile = user.profile_snapshot()

            request = JoinRequest(
                id=RequestId(uuid4()),
                user_id=user_id,
                profile=profile,
                requested_at=now,
            )

            def add_request(game: Game) -> Game:
                gid = str(game.id)
                if game.is_host(user_id):
                    raise AlreadyMemberError(gid, str(user_id), "is the host")
                if game.is_participant(user_id):
                    raise AlreadyMemberError(
                        gid, str(user_id), "is already registered"
                    )
                if game.pending_request_for(user_id) is not None:
                    raise AlreadyMemberError(
                        gid, str(user_id), "already has a pending join request"
                    )
                if game.status != GameStatus.UPCOMING:
                    raise GameNotJoinableError(gid, game.status.value)
                if game.seats_left <= 0:
                    raise GameFullError(gid)
                return game.evolve(join_requests=[*game.join_requests, request])

            _, game = await self.game_writer.apply(game_id, add_request)
            logfire.info(
                "Join request created",
                game_id=str(game_id),
                user_id=str(user_id),
                request_id=str(request.id),
            )

            await self.notification_service.notify(
                game.host_id,
                NotificationType.NEW_JOIN_REQUEST,
                "New Join Request",
                f'{profile.name} wants to join your game "{game.title}"',
                game_id=game.id,
                related_user_id=user_id,
            )
            await self.notification_service.notify(
                user_id,
                NotificationType.JOIN_REQUEST_SENT,
                "Join Request Sent",
                f'Your request to join "{game.title}" has been sent. '
                "Waiting for host approval.",
                game_id=game.id,
                related_user_id=game.host_id,
            )
            return request

    async def accept_request(
        self,
        game_id: GameId,
        request_id: RequestId,
        acting_user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Game:
        """Turn a pending request into a registered player.

        Args:
            game_id: Game ID
            request_id: Pending request ID
            acting_user_id: User accepting (must be the current host)
            now: Current time

        Returns:
            Updated game

        Raises:
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            GameCompletedError: If the game is completed
            GameCancelledError: If the game is cancelled
            RequestNotFoundError: If the request is not pending
            SeatTakenError: If no seat is left when the write happens
        """
        now = now or datetime.now()
        with logfire.span(
            "roster_service.accept_request",
            game_id=str(game_id),
            request_id=str(request_id),
            acting_user_id=str(acting_user_id),
        ):

            def accept(game: Game) -> Game:
                require_host(game, acting_user_id, "accept join requests")
                require_open(game)
                request = game.require_request(request_id)
                if game.seats_left <= 0:
                    raise SeatTakenError(str(game.id))
                participant = Participant(
                    user_id=request.user_id, profile=request.profile, joined_at=now
                )
                return game.evolve(
                    join_requests=[r for r in game.join_requests if r.id != request_id],
                    registered_players=[*game.registered_players, participant],
                )

            try:
                before, game = await self.game_writer.apply(game_id, accept)
            except SeatTakenError:
                logfire.warn(
                    "Accept lost the last seat",
                    game_id=str(game_id),
                    request_id=str(request_id),
                )
                raise

            request = before.require_request(request_id)
            logfire.info(
                "Join request accepted",
                game_id=str(game_id),
                user_id=str(request.user_id),
                seats_left=game.seats_left,
            )

            await self.notification_service.notify(
                request.user_id,
                NotificationType.JOIN_REQUEST_ACCEPTED,
                "Join Request Accepted",
                f'Your request to join "{game.title}" has been accepted!',
                game_id=game.id,
                related_user_id=acting_user_id,
            )
            return game

    async def reject_request(
        self, game_id: GameId, request_id: RequestId, acting_user_id: UserId
    ) -> None:
        """Discard a pending request. No seat effect.

        Args:
            game_id: Game ID
            request_id: Pending request ID
            acting_user_id: User rejecting (must be the current host)

        Raises:
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            RequestNotFoundError: If the request is not pending
        """
        with logfire.span(
            "roster_service.reject_request",
            game_id=str(game_id),
            request_id=str(request_id),
            acting_user_id=str(acting_user_id),
        ):

            def reject(game: Game) -> Game:
                require_host(game, acting_user_id, "reject join requests")
                game.require_request(request_id)
                return game.evolve(
                    join_requests=[r for r in game.join_requests if r.id != request_id]
                )

            before, game = await self.game_writer.apply(game_id, reject)
            request = before.require_request(request_id)
            logfire.info(
                "Join request rejected",
                game_id=str(game_id),
                user_id=str(request.user_id),
            )

            await self.notification_service.notify(
                request.user_id,
                NotificationType.JOIN_REQUEST_REJECTED,
                "Join Request Rejected",
                f'Your request to join "{game.title}" has been rejected.',
                game_id=game.id,
                related_user_id=acting_user_id,
            )

    async def remove_participant(
        self,
        game_id: GameId,
        user_id: UserId,
        acting_user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Game:
        """Remove a player from the roster, freeing their seat.

        The host may remove any player. Anyone may remove themself (leave);
        a requester leaving withdraws their pending request. A host can only
        leave a game with no players, which cancels it.

        Args:
            game_id: Game ID
            user_id: User to remove
            acting_user_id: User performing the removal
            now: Current time

        Returns:
            Updated game

        Raises:
            NotFoundError: If the game does not exist
            NotHostError: If removing someone else without being host
            GameCompletedError: If the game is completed
            GameCancelledError: If the game is cancelled
            LastHostWithPlayersError: If the host leaves while players remain
            NotParticipantError: If the user is not in the game
        """
        now = now or datetime.now()
        leaving = user_id == acting_user_id
        with logfire.span(
            "roster_service.remove_participant",
            game_id=str(game_id),
            user_id=str(user_id),
            acting_user_id=str(acting_user_id),
        ):

            def remove(game: Game) -> Game:
                if not leaving:
                    require_host(game, acting_user_id, "remove players")
                require_open(game)

                if game.is_host(user_id):
                    if game.registered_players:
                        raise LastHostWithPlayersError(
                            str(game.id), len(game.registered_players)
                        )
                    return transition(game, GameStatus.CANCELLED, now)

                if game.is_participant(user_id):
                    return game.evolve(
                        registered_players=[
                            p for p in game.registered_players if p.user_id != user_id
                        ],
                        attendance=[a for a in game.attendance if a.user_id != user_id],
                    )

                if leaving and game.pending_request_for(user_id) is not None:
                    return game.evolve(
                        join_requests=[
                            r for r in game.join_requests if r.user_id != user_id
                        ]
                    )

                raise NotParticipantError(str(game.id), str(user_id))

            before, game = await self.game_writer.apply(game_id, remove)

            if game.status == GameStatus.CANCELLED:
                logfire.info("Host left empty game, cancelled", game_id=str(game_id))
                return game

            removed = before.find_participant(user_id)
            if removed is None:
                logfire.info(
                    "Join request withdrawn", game_id=str(game_id), user_id=str(user_id)
                )
                return game

            logfire.info(
                "Participant removed",
                game_id=str(game_id),
                user_id=str(user_id),
                by_host=not leaving,
                seats_left=game.seats_left,
            )
            if leaving:
                await self.notification_service.notify(
                    game.host_id,
                    NotificationType.PLAYER_LEFT,
                    "Player Left",
                    f'{removed.profile.name} has left "{game.title}".',
                    game_id=game.id,
                    related_user_id=user_id,
                )
            else:
                await self.notification_service.notify(
                    user_id,
                    NotificationType.PLAYER_LEFT,
                    "Removed from Game",
                    f'You have been removed from "{game.title}" by the host.',
                    game_id=game.id,
                    related_user_id=acting_user_id,
                )
            return game

    async def leave_game(
        self,
        game_id: GameId,
        acting_user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Game:
        """Remove the caller from a game (see ``remove_participant``)."""
        return await self.remove_participant(
            game_id, acting_user_id, acting_user_id, now=now
        )

    async def list_pending_requests(self, user_id: UserId) -> list[Game]:
        """Open games where the user is still waiting for the host."""
        return await self.game_repository.find_by_requester(user_id)
