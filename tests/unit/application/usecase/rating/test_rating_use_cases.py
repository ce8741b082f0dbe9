"""Unit tests for rating use cases."""

from datetime import datetime

import pytest

from gameon.application.outcome import run_operation
from gameon.application.usecase.rating import (
    ListCompletedGamesRequest,
    ListCompletedGamesUseCase,
    RatePlayerRequest,
    RatePlayerUseCase,
)
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.service import JWTService
from gameon.domain.value import ErrorKind, GameStatus
from tests.conftest import make_game, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRatingUseCases:
    """Tests for RatePlayerUseCase and ListCompletedGamesUseCase."""

    @pytest.mark.asyncio
    async def test_rate_then_list(self, unit_env):
        # Arrange
        rate = await unit_env.get(RatePlayerUseCase)
        list_completed = await unit_env.get(ListCompletedGamesUseCase)
        jwt_service = await unit_env.get(JWTService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)

        host = await user_repo.save(make_user("Host"))
        player = await user_repo.save(make_user("Player"))
        game = await game_repo.create(
            make_game(
                host_id=host.id,
                players=[player.id],
                status=GameStatus.COMPLETED,
                completed_at=datetime.now(),
            )
        )
        token = jwt_service.create_token(str(player.id))

        # Act
        response = await rate.execute(
            RatePlayerRequest(
                auth_token=token, game_id=str(game.id), player_id=str(host.id), rating=5
            )
        )
        listed = await list_completed.execute(ListCompletedGamesRequest(auth_token=token))

        # Assert
        assert response.success
        assert response.message == "Rating submitted successfully"
        assert response.average_rating == 5
        assert listed.games[0].game.game_id == str(game.id)
        assert listed.games[0].players_rated == [str(host.id)]

    @pytest.mark.asyncio
    async def test_rating_out_of_range_is_validation_outcome(self, unit_env):
        rate = await unit_env.get(RatePlayerUseCase)
        jwt_service = await unit_env.get(JWTService)
        game_repo = await unit_env.get(GameRepository)
        user = make_user()
        game = await game_repo.create(make_game(players=[user.id]))

        outcome = await run_operation(
            rate.execute(
                RatePlayerRequest(
                    auth_token=jwt_service.create_token(str(user.id)),
                    game_id=str(game.id),
                    player_id=str(game.host_id),
                    rating=9,
                )
            )
        )

        assert outcome.error.kind == ErrorKind.VALIDATION
