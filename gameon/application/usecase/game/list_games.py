"""List games use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from gameon.application.usecase.base import parse_id
from gameon.application.usecase.views import GameListResponse, GameResponse
from gameon.domain.service import LifecycleService
from gameon.domain.value import GameStatus, UserId


class ListGamesRequest(BaseModel):
    """List games request."""

    statuses: Optional[list[GameStatus]] = None  # Defaults to upcoming + ongoing
    sport: Optional[str] = None
    host_id: Optional[str] = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListGamesUseCase:
    """Use case for browsing games."""

    def __init__(self, lifecycle_service: LifecycleService) -> None:
        """Initialize list games use case.

        Args:
            lifecycle_service: Lifecycle domain service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: ListGamesRequest) -> GameListResponse:
        """Execute list games flow."""
        with logfire.span(
            "list_games.execute",
            sport=request.sport,
            limit=request.limit,
            offset=request.offset,
        ):
            host_id = (
                UserId(parse_id(request.host_id, "host ID"))
                if request.host_id
                else None
            )
            games = await self.lifecycle_service.list_games(
                statuses=request.statuses,
                sport=request.sport,
                host_id=host_id,
                limit=request.limit,
                offset=request.offset,
            )
            return GameListResponse(games=[GameResponse.from_game(g) for g in games])
