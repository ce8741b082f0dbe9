"""Transfer host use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import HostTransferService, IdentityProvider
from gameon.domain.value import GameId, UserId


class TransferHostRequest(BaseModel):
    """Transfer host request."""

    auth_token: Optional[str] = None
    game_id: str
    new_host_id: str


class TransferHostUseCase:
    """Use case for handing the host role to a registered player."""

    def __init__(
        self,
        host_transfer_service: HostTransferService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize transfer host use case.

        Args:
            host_transfer_service: Host transfer domain service
            identity_provider: Resolves the caller from the token
        """
        self.host_transfer_service = host_transfer_service
        self.identity_provider = identity_provider

    async def execute(self, request: TransferHostRequest) -> GameResponse:
        """Execute transfer flow.

        Raises:
            UnauthorizedError: If the token is missing or invalid
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            ValidationError: If the caller names themself
            NotParticipantError: If the new host is not a registered player
        """
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))
        new_host_id = UserId(parse_id(request.new_host_id, "new host ID"))

        with logfire.span(
            "transfer_host.execute",
            game_id=str(game_id),
            new_host_id=str(new_host_id),
        ):
            game = await self.host_transfer_service.transfer_host(
                game_id, user_id, new_host_id
            )
            return GameResponse.from_game(game)
