"""Accept join request use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import IdentityProvider, RosterService
from gameon.domain.value import GameId, RequestId


class AcceptJoinRequestRequest(BaseModel):
    """Accept join request request."""

    auth_token: Optional[str] = None
    game_id: str
    request_id: str


class AcceptJoinRequestUseCase:
    """Use case for the host accepting a pending request."""

    def __init__(
        self,
        roster_service: RosterService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize accept join request use case.

        Args:
            roster_service: Roster domain service
            identity_provider: Resolves the caller from the token
        """
        self.roster_service = roster_service
        self.identity_provider = identity_provider

    async def execute(self, request: AcceptJoinRequestRequest) -> GameResponse:
        """Execute accept flow.

        Raises:
            UnauthorizedError: If the token is missing or invalid
            NotFoundError: If the game or request does not exist
            NotHostError: If the caller is not the host
            SeatTakenError: If the last seat went to someone else first
        """
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))
        request_id = RequestId(parse_id(request.request_id, "request ID"))

        with logfire.span(
            "accept_join_request.execute",
            game_id=str(game_id),
            request_id=str(request_id),
        ):
            game = await self.roster_service.accept_request(
                game_id, request_id, user_id
            )
            return GameResponse.from_game(game)
