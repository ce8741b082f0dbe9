"""Leave game use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import IdentityProvider, RosterService
from gameon.domain.value import GameId


class LeaveGameRequest(BaseModel):
    """Leave game request."""

    auth_token: Optional[str] = None
    game_id: str


class LeaveGameUseCase:
    """Use case for the caller leaving a game."""

    def __init__(
        self,
        roster_service: RosterService,
        identity_provider: IdentityProvider,
    ) -> None:
        self.roster_service = roster_service
        self.identity_provider = identity_provider

    async def execute(self, request: LeaveGameRequest) -> GameResponse:
        """Execute leave flow."""
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))

        with logfire.span(
            "leave_game.execute", game_id=str(game_id), user_id=str(user_id)
        ):
            game = await self.roster_service.leave_game(game_id, user_id)
            return GameResponse.from_game(game)
