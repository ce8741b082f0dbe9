"""Unit tests for TransferHostUseCase."""

import pytest

from gameon.application.usecase.host import TransferHostRequest, TransferHostUseCase
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.service import JWTService
from tests.conftest import make_game, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTransferHostUseCase:
    """Tests for TransferHostUseCase."""

    @pytest.mark.asyncio
    async def test_transfer_host(self, unit_env):
        use_case = await unit_env.get(TransferHostUseCase)
        jwt_service = await unit_env.get(JWTService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)

        host = await user_repo.save(make_user("Host"))
        player = await user_repo.save(make_user("Player"))
        game = await game_repo.create(make_game(host_id=host.id, players=[player.id]))

        response = await use_case.execute(
            TransferHostRequest(
                auth_token=jwt_service.create_token(str(host.id)),
                game_id=str(game.id),
                new_host_id=str(player.id),
            )
        )

        assert response.host_id == str(player.id)
        assert [p.user_id for p in response.registered_players] == [str(host.id)]
