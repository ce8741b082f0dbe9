"""Rate player use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from gameon.application.usecase.base import authenticate, parse_id
from gameon.domain.service import IdentityProvider, RatingService
from gameon.domain.value import GameId, UserId


class RatePlayerRequest(BaseModel):
    """Rate player request."""

    auth_token: Optional[str] = None
    game_id: str
    player_id: str
    rating: int
    comment: Optional[str] = None


class RatePlayerResponse(BaseModel):
    """Rate player response."""

    success: bool = True
    message: str = "Rating submitted successfully"
    average_rating: float
    total_ratings: int


class RatePlayerUseCase:
    """Use case for rating another player after a completed game."""

    def __init__(
        self,
        rating_service: RatingService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize rate player use case.

        Args:
            rating_service: Rating domain service
            identity_provider: Resolves the caller from the token
        """
        self.rating_service = rating_service
        self.identity_provider = identity_provider

    async def execute(self, request: RatePlayerRequest) -> RatePlayerResponse:
        """Execute rate player flow.

        Raises:
            UnauthorizedError: If the token is missing or invalid
            ValidationError: If the rating is out of range or self-directed
            NotFoundError: If the game or a user does not exist
            GameNotCompletedError: If the game is not completed
            NotParticipantError: If either user was not in the game
            DuplicateRatingError: If the caller already rated this player
        """
        rater_id = authenticate(self.identity_provider, request.auth_token)
        game_id = GameId(parse_id(request.game_id, "game ID"))
        ratee_id = UserId(parse_id(request.player_id, "player ID"))

        with logfire.span(
            "rate_player.execute",
            game_id=str(game_id),
            ratee_id=str(ratee_id),
        ):
            ratee = await self.rating_service.rate_player(
                game_id,
                rater_id,
                ratee_id,
                request.rating,
                comment=request.comment,
            )
            return RatePlayerResponse(
                average_rating=ratee.average_rating,
                total_ratings=ratee.total_ratings,
            )
