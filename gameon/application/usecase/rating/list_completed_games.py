"""List completed games use case."""

from typing import Optional

from pydantic import BaseModel

from gameon.application.usecase.base import authenticate
from gameon.application.usecase.views import GameResponse
from gameon.domain.service import IdentityProvider, RatingService


class CompletedGameView(BaseModel):
    """A completed game and the players the caller already rated."""

    game: GameResponse
    players_rated: list[str]


class ListCompletedGamesRequest(BaseModel):
    """List completed games request."""

    auth_token: Optional[str] = None


class ListCompletedGamesResponse(BaseModel):
    """List completed games response."""

    games: list[CompletedGameView]


class ListCompletedGamesUseCase:
    """Use case for listing the caller's completed games to rate."""

    def __init__(
        self,
        rating_service: RatingService,
        identity_provider: IdentityProvider,
    ) -> None:
        self.rating_service = rating_service
        self.identity_provider = identity_provider

    async def execute(
        self, request: ListCompletedGamesRequest
    ) -> ListCompletedGamesResponse:
        """Execute list completed games flow."""
        user_id = authenticate(self.identity_provider, request.auth_token)
        rateable = await self.rating_service.list_rateable_games(user_id)
        return ListCompletedGamesResponse(
            games=[
                CompletedGameView(
                    game=GameResponse.from_game(r.game),
                    players_rated=[str(uid) for uid in r.players_rated],
                )
                for r in rateable
            ]
        )
