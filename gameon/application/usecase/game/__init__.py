"""Game use cases."""

from .cancel_game import CancelGameRequest, CancelGameUseCase
from .create_game import CreateGameRequest, CreateGameUseCase, LocationInput
from .get_game import GetGameRequest, GetGameUseCase
from .list_games import ListGamesRequest, ListGamesUseCase

__all__ = [
    "CancelGameRequest",
    "CancelGameUseCase",
    "CreateGameRequest",
    "CreateGameUseCase",
    "GetGameRequest",
    "GetGameUseCase",
    "ListGamesRequest",
    "ListGamesUseCase",
    "LocationInput",
]
