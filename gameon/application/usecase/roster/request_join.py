"""Request join use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.domain.service import IdentityProvider, RosterService
from gameon.domain.value import GameId


class RequestJoinRequest(BaseModel):
    """Request join request."""

    auth_token: Optional[str] = None
    game_id: str


class RequestJoinResponse(BaseModel):
    """Request join response."""

    request_id: str
    game_id: str
    requested_at: datetime


class RequestJoinUseCase:
    """Use case for asking the host to join a game."""

    def __init__(
        self,
        roster_service: RosterService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize request join use case.

        Args:
            roster_service: Roster domain service
            identity_provider: Resolves the caller from the token
        """
        self.roster_service = roster_service
        self.identity_provider = identity_provider

    async def execute(self, request: RequestJoinRequest) -> RequestJoinResponse:
        """Execute request join flow.

        The caller's current profile is snapshotted onto the request.

        Raises:
            UnauthorizedError: If the token is missing or invalid
            NotFoundError: If the game or the caller's profile does not exist
            AlreadyMemberError: If the caller already belongs to the game
            GameNotJoinableError: If the game is not upcoming
            GameFullError: If no seats are left
        """
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))

        with logfire.span(
            "request_join.execute", game_id=str(game_id), user_id=str(user_id)
        ):
            join_request = await self.roster_service.request_join(game_id, user_id)
            return RequestJoinResponse(
                request_id=str(join_request.id),
                game_id=str(game_id),
                requested_at=join_request.requested_at,
            )
