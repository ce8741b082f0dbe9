"""Reject join request use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.domain.service import IdentityProvider, RosterService
from gameon.domain.value import GameId, RequestId


class RejectJoinRequestRequest(BaseModel):
    """Reject join request request."""

    auth_token: Optional[str] = None
    game_id: str
    request_id: str


class RejectJoinRequestResponse(BaseModel):
    """Reject join request response."""

    game_id: str
    request_id: str


class RejectJoinRequestUseCase:
    """Use case for the host rejecting a pending request."""

    def __init__(
        self,
        roster_service: RosterService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize reject join request use case.

        Args:
            roster_service: Roster domain service
            identity_provider: Resolves the caller from the token
        """
        self.roster_service = roster_service
        self.identity_provider = identity_provider

    async def execute(
        self, request: RejectJoinRequestRequest
    ) -> RejectJoinRequestResponse:
        """Execute reject flow."""
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))
        request_id = RequestId(parse_id(request.request_id, "request ID"))

        with logfire.span(
            "reject_join_request.execute",
            game_id=str(game_id),
            request_id=str(request_id),
        ):
            await self.roster_service.reject_request(game_id, request_id, user_id)
            return RejectJoinRequestResponse(
                game_id=str(game_id), request_id=str(request_id)
            )
