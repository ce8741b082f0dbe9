"""Unit tests for roster use cases."""

import pytest

from gameon.application.outcome import run_operation
from gameon.application.usecase.roster import (
    AcceptJoinRequestRequest,
    AcceptJoinRequestUseCase,
    LeaveGameRequest,
    LeaveGameUseCase,
    ListPendingRequestsRequest,
    ListPendingRequestsUseCase,
    RejectJoinRequestRequest,
    RejectJoinRequestUseCase,
    RemoveParticipantRequest,
    RemoveParticipantUseCase,
    RequestJoinRequest,
    RequestJoinUseCase,
)
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.service import JWTService
from gameon.domain.value import ErrorKind
from tests.conftest import make_game, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRosterUseCases:
    """Join, accept, reject and leave through the use case layer."""

    @pytest.mark.asyncio
    async def test_join_accept_leave(self, unit_env):
        # Arrange
        request_join = await unit_env.get(RequestJoinUseCase)
        accept = await unit_env.get(AcceptJoinRequestUseCase)
        leave = await unit_env.get(LeaveGameUseCase)
        jwt_service = await unit_env.get(JWTService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)

        host = await user_repo.save(make_user("Host"))
        player = await user_repo.save(make_user("Player"))
        game = await game_repo.create(make_game(host_id=host.id))
        host_token = jwt_service.create_token(str(host.id))
        player_token = jwt_service.create_token(str(player.id))

        # Act
        joined = await request_join.execute(
            RequestJoinRequest(auth_token=player_token, game_id=str(game.id))
        )
        accepted = await accept.execute(
            AcceptJoinRequestRequest(
                auth_token=host_token,
                game_id=str(game.id),
                request_id=joined.request_id,
            )
        )
        left = await leave.execute(
            LeaveGameRequest(auth_token=player_token, game_id=str(game.id))
        )

        # Assert
        assert [p.user_id for p in accepted.registered_players] == [str(player.id)]
        assert accepted.join_requests == []
        assert left.registered_players == []
        assert left.seats_left == game.seats_left

    @pytest.mark.asyncio
    async def test_reject_and_list_pending(self, unit_env):
        request_join = await unit_env.get(RequestJoinUseCase)
        reject = await unit_env.get(RejectJoinRequestUseCase)
        list_pending = await unit_env.get(ListPendingRequestsUseCase)
        jwt_service = await unit_env.get(JWTService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)

        player = await user_repo.save(make_user("Player"))
        game = await game_repo.create(make_game())
        token = jwt_service.create_token(str(player.id))
        joined = await request_join.execute(
            RequestJoinRequest(auth_token=token, game_id=str(game.id))
        )

        pending = await list_pending.execute(ListPendingRequestsRequest(auth_token=token))
        assert [g.game_id for g in pending.games] == [str(game.id)]

        response = await reject.execute(
            RejectJoinRequestRequest(
                auth_token=jwt_service.create_token(str(game.host_id)),
                game_id=str(game.id),
                request_id=joined.request_id,
            )
        )
        assert response.request_id == joined.request_id

        pending = await list_pending.execute(ListPendingRequestsRequest(auth_token=token))
        assert pending.games == []

    @pytest.mark.asyncio
    async def test_remove_by_non_host_is_forbidden_outcome(self, unit_env):
        remove = await unit_env.get(RemoveParticipantUseCase)
        jwt_service = await unit_env.get(JWTService)
        game_repo = await unit_env.get(GameRepository)
        a, b = make_user("A"), make_user("B")
        game = await game_repo.create(make_game(players=[a.id, b.id]))

        outcome = await run_operation(
            remove.execute(
                RemoveParticipantRequest(
                    auth_token=jwt_service.create_token(str(a.id)),
                    game_id=str(game.id),
                    player_id=str(b.id),
                )
            )
        )

        assert not outcome.success
        assert outcome.error.kind == ErrorKind.FORBIDDEN
