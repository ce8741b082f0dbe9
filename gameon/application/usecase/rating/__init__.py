"""Rating use cases."""

from .list_completed_games import (
    CompletedGameView,
    ListCompletedGamesRequest,
    ListCompletedGamesResponse,
    ListCompletedGamesUseCase,
)
from .rate_player import RatePlayerRequest, RatePlayerResponse, RatePlayerUseCase

__all__ = [
    "CompletedGameView",
    "ListCompletedGamesRequest",
    "ListCompletedGamesResponse",
    "ListCompletedGamesUseCase",
    "RatePlayerRequest",
    "RatePlayerResponse",
    "RatePlayerUseCase",
]
