"""List pending requests use case."""

from typing import Optional

from pydantic import BaseModel

from gameon.application.usecase.base import authenticate
from gameon.application.usecase.views import GameListResponse, GameResponse
from gameon.domain.service import IdentityProvider, RosterService


class ListPendingRequestsRequest(BaseModel):
    """List pending requests request."""

    auth_token: Optional[str] = None


class ListPendingRequestsUseCase:
    """Use case for listing games the caller is waiting to join."""

    def __init__(
        self,
        roster_service: RosterService,
        identity_provider: IdentityProvider,
    ) -> None:
        self.roster_service = roster_service
        self.identity_provider = identity_provider

    async def execute(self, request: ListPendingRequestsRequest) -> GameListResponse:
        """Execute list pending requests flow."""
        user_id = authenticate(self.identity_provider, request.auth_token)
        games = await self.roster_service.list_pending_requests(user_id)
        return GameListResponse(games=[GameResponse.from_game(g) for g in games])
