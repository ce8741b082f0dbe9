"""Mark attendance use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import AttendanceService, IdentityProvider
from gameon.domain.value import GameId, UserId


class MarkAttendanceRequest(BaseModel):
    """Mark attendance request."""

    auth_token: Optional[str] = None
    game_id: str
    player_ids: list[str] = []
    mark_all: bool = False


class MarkAttendanceUseCase:
    """Use case for the host confirming who showed up."""

    def __init__(
        self,
        attendance_service: AttendanceService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize mark attendance use case.

        Args:
            attendance_service: Attendance domain service
            identity_provider: Resolves the caller from the token
        """
        self.attendance_service = attendance_service
        self.identity_provider = identity_provider

    async def execute(self, request: MarkAttendanceRequest) -> GameResponse:
        """Execute mark attendance flow.

        Returns:
            The game, ``completed`` once every party has attended

        Raises:
            UnauthorizedError: If the token is missing or invalid
            ValidationError: If no players are given and ``mark_all`` is unset
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            InvalidStateError: If the game is closed or has not started
            NotParticipantError: If a target is not in the game
        """
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))
        player_ids = [
            UserId(parse_id(player_id, "player ID")) for player_id in request.player_ids
        ]

        with logfire.span(
            "mark_attendance.execute",
            game_id=str(game_id),
            players=len(player_ids),
            mark_all=request.mark_all,
        ):
            game = await self.attendance_service.mark_attendance(
                game_id,
                user_id,
                player_ids=player_ids,
                mark_all=request.mark_all,
            )
            return GameResponse.from_game(game)
