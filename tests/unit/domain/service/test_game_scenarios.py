"""End-to-end game flows across the domain services."""

import datetime as dt
from datetime import datetime

import pytest

from gameon.domain.error import DuplicateRatingError, LastHostWithPlayersError
from gameon.domain.model import Game
from gameon.domain.repository import UserRepository
from gameon.domain.service import (
    AttendanceService,
    HostTransferService,
    LifecycleService,
    RatingService,
    RosterService,
)
from gameon.domain.value import GameStatus, Location
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CREATED_AT = datetime(2026, 4, 20, 9, 0)
GAME_DAY = dt.date(2026, 5, 1)
AFTER_START = datetime(2026, 5, 1, 20, 30)


def assert_roster_invariants(game: Game) -> None:
    player_ids = [p.user_id for p in game.registered_players]
    requester_ids = {r.user_id for r in game.join_requests}
    assert game.seats_left == game.max_players - len(player_ids) - 1
    assert game.host_id not in player_ids
    assert not requester_ids & set(player_ids)


async def create_game(lifecycle_service: LifecycleService, host_id, max_players: int):
    return await lifecycle_service.create_game(
        host_id=host_id,
        title="Evening Five-a-side",
        sport="football",
        description="Bring a dark and a light shirt",
        location=Location(address="https://maps.example.com/pitch"),
        date=GAME_DAY,
        start_time=dt.time(19, 0),
        end_time=dt.time(20, 0),
        max_players=max_players,
        now=CREATED_AT,
    )


class TestGameScenarios:
    """Whole flows from creation to rating."""

    @pytest.mark.asyncio
    async def test_join_accept_reject(self, unit_env):
        # Arrange
        lifecycle_service = await unit_env.get(LifecycleService)
        roster_service = await unit_env.get(RosterService)
        user_repo = await unit_env.get(UserRepository)
        host = await user_repo.save(make_user("Host"))
        a = await user_repo.save(make_user("A"))
        b = await user_repo.save(make_user("B"))
        game = await create_game(lifecycle_service, host.id, max_players=4)
        assert game.seats_left == 3

        # Act / Assert
        request_a = await roster_service.request_join(game.id, a.id, now=CREATED_AT)
        game = await lifecycle_service.get_game(game.id)
        assert game.seats_left == 3
        assert_roster_invariants(game)

        game = await roster_service.accept_request(
            game.id, request_a.id, host.id, now=CREATED_AT
        )
        assert game.seats_left == 2
        assert game.is_participant(a.id)
        assert_roster_invariants(game)

        request_b = await roster_service.request_join(game.id, b.id, now=CREATED_AT)
        await roster_service.reject_request(game.id, request_b.id, host.id)
        game = await lifecycle_service.get_game(game.id)
        assert game.seats_left == 2
        assert game.join_requests == []
        assert_roster_invariants(game)

    @pytest.mark.asyncio
    async def test_transfer_then_old_host_leaves(self, unit_env):
        # Arrange
        lifecycle_service = await unit_env.get(LifecycleService)
        roster_service = await unit_env.get(RosterService)
        host_transfer_service = await unit_env.get(HostTransferService)
        user_repo = await unit_env.get(UserRepository)
        host = await user_repo.save(make_user("Host"))
        a = await user_repo.save(make_user("A"))
        game = await create_game(lifecycle_service, host.id, max_players=4)
        request = await roster_service.request_join(game.id, a.id, now=CREATED_AT)
        game = await roster_service.accept_request(
            game.id, request.id, host.id, now=CREATED_AT
        )

        with pytest.raises(LastHostWithPlayersError):
            await roster_service.leave_game(game.id, host.id, now=CREATED_AT)

        # Act
        transferred = await host_transfer_service.transfer_host(
            game.id, host.id, a.id, now=CREATED_AT
        )
        after_leave = await roster_service.leave_game(game.id, host.id, now=CREATED_AT)

        # Assert
        assert transferred.host_id == a.id
        assert transferred.is_participant(host.id)
        assert transferred.seats_left == game.seats_left
        assert_roster_invariants(transferred)
        assert after_leave.host_id == a.id
        assert after_leave.registered_players == []
        assert after_leave.status == GameStatus.UPCOMING
        assert_roster_invariants(after_leave)

    @pytest.mark.asyncio
    async def test_completion_then_rating(self, unit_env):
        # Arrange
        lifecycle_service = await unit_env.get(LifecycleService)
        roster_service = await unit_env.get(RosterService)
        attendance_service = await unit_env.get(AttendanceService)
        rating_service = await unit_env.get(RatingService)
        user_repo = await unit_env.get(UserRepository)
        host = await user_repo.save(make_user("Host"))
        a = await user_repo.save(make_user("A"))
        b = await user_repo.save(make_user("B"))
        game = await create_game(lifecycle_service, host.id, max_players=3)
        for user in (a, b):
            request = await roster_service.request_join(game.id, user.id, now=CREATED_AT)
            game = await roster_service.accept_request(
                game.id, request.id, host.id, now=CREATED_AT
            )
        assert game.seats_left == 0

        # Act: one party per call, completion on the last
        for i, user_id in enumerate((host.id, a.id, b.id)):
            game = await attendance_service.mark_attendance(
                game.id, host.id, player_ids=[user_id], now=AFTER_START
            )
            expected = GameStatus.COMPLETED if i == 2 else GameStatus.UPCOMING
            assert game.status == expected

        rated = await rating_service.rate_player(game.id, a.id, b.id, 5)

        # Assert
        assert rated.average_rating == 5
        assert rated.total_ratings == 1
        assert rated.games_played == 1
        with pytest.raises(DuplicateRatingError):
            await rating_service.rate_player(game.id, a.id, b.id, 4)
        assert (await user_repo.find_by_id(b.id)).total_ratings == 1
