"""Get game use case."""

from pydantic import BaseModel

from gameon.application.usecase.base import parse_id
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import LifecycleService
from gameon.domain.value import GameId


class GetGameRequest(BaseModel):
    """Get game request."""

    game_id: str


class GetGameUseCase:
    """Use case for reading one game."""

    def __init__(self, lifecycle_service: LifecycleService) -> None:
        """Initialize get game use case.

        Args:
            lifecycle_service: Lifecycle domain service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: GetGameRequest) -> GameResponse:
        """Execute get game flow.

        Raises:
            NotFoundError: If the game does not exist
        """
        game_id = GameId(parse_id(request.game_id, "game ID"))
        game = await self.lifecycle_service.get_game(game_id)
        return GameResponse.from_game(game)
