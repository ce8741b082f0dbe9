"""Remove participant use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import IdentityProvider, RosterService
from gameon.domain.value import GameId, UserId


class RemoveParticipantRequest(BaseModel):
    """Remove participant request."""

    auth_token: Optional[str] = None
    game_id: str
    player_id: str


class RemoveParticipantUseCase:
    """Use case for the host removing a player (or a player leaving)."""

    def __init__(
        self,
        roster_service: RosterService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize remove participant use case.

        Args:
            roster_service: Roster domain service
            identity_provider: Resolves the caller from the token
        """
        self.roster_service = roster_service
        self.identity_provider = identity_provider

    async def execute(self, request: RemoveParticipantRequest) -> GameResponse:
        """Execute remove flow.

        Raises:
            UnauthorizedError: If the token is missing or invalid
            NotFoundError: If the game does not exist
            NotHostError: If removing someone else without being host
            NotParticipantError: If the player is not in the game
            LastHostWithPlayersError: If the host tries to leave with players
        """
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))
        player_id = UserId(parse_id(request.player_id, "player ID"))

        with logfire.span(
            "remove_participant.execute",
            game_id=str(game_id),
            player_id=str(player_id),
        ):
            game = await self.roster_service.remove_participant(
                game_id, player_id, user_id
            )
            return GameResponse.from_game(game)
