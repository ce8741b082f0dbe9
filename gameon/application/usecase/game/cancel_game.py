"""Cancel game use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import IdentityProvider, LifecycleService
from gameon.domain.value import GameId


class CancelGameRequest(BaseModel):
    """Cancel game request."""

    auth_token: Optional[str] = None
    game_id: str


class CancelGameUseCase:
    """Use case for the host cancelling a game."""

    def __init__(
        self,
        lifecycle_service: LifecycleService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize cancel game use case.

        Args:
            lifecycle_service: Lifecycle domain service
            identity_provider: Resolves the caller from the token
        """
        self.lifecycle_service = lifecycle_service
        self.identity_provider = identity_provider

    async def execute(self, request: CancelGameRequest) -> GameResponse:
        """Execute cancel game flow.

        Raises:
            UnauthorizedError: If the token is missing or invalid
            NotFoundError: If the game does not exist
            NotHostError: If the caller is not the host
            InvalidStateError: If the game is already completed or cancelled
        """
        user_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))

        with logfire.span("cancel_game.execute", game_id=str(game_id)):
            game = await self.lifecycle_service.cancel_game(game_id, user_id)
            return GameResponse.from_game(game)
