"""Unit tests for LifecycleService and lifecycle helpers."""

import datetime as dt
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from gameon.adapter.notification.dispatcher import RecordingNotificationDispatcher
from gameon.domain.error import (
    GameCancelledError,
    GameCompletedError,
    NotHostError,
    ValidationError,
)
from gameon.domain.repository import GameRepository
from gameon.domain.service import LifecycleService, derive_effective_status
from gameon.domain.service.lifecycle_service import transition
from gameon.domain.value import GameStatus, Location, NotificationType, UserId
from tests.conftest import make_game
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

NOW = datetime(2026, 5, 1, 12, 0)


def _create_kwargs(**overrides) -> dict:
    kwargs = dict(
        host_id=UserId(uuid4()),
        title="Evening Tennis",
        sport="tennis",
        description="Doubles, bring a racket",
        location=Location(address="https://maps.example.com/club"),
        date=dt.date(2026, 5, 3),
        start_time=dt.time(19, 0),
        end_time=dt.time(20, 30),
        max_players=4,
        now=NOW,
    )
    kwargs.update(overrides)
    return kwargs


class TestCreateGame:
    """Tests for create_game."""

    @pytest.mark.asyncio
    async def test_create_game_starts_upcoming(self, unit_env):
        lifecycle_service = await unit_env.get(LifecycleService)
        game_repo = await unit_env.get(GameRepository)
        kwargs = _create_kwargs()

        game = await lifecycle_service.create_game(**kwargs)

        assert game.status == GameStatus.UPCOMING
        assert game.host_id == kwargs["host_id"]
        assert game.registered_players == []
        assert game.seats_left == 3
        assert game.version == 0
        assert await game_repo.find_by_id(game.id) == game

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"title": "  "}, "Missing required fields: title"),
            ({"sport": "quidditch"}, "Invalid sport"),
            ({"max_players": 1}, "at least 2"),
            ({"date": dt.date(2026, 5, 1)}, "on or after"),
            ({"end_time": dt.time(18, 0)}, "End time must be after"),
            ({"end_time": dt.time(19, 30)}, "duration"),
        ],
    )
    async def test_create_game_validation(self, unit_env, overrides, message):
        lifecycle_service = await unit_env.get(LifecycleService)

        with pytest.raises(ValidationError, match=message):
            await lifecycle_service.create_game(**_create_kwargs(**overrides))


class TestCancelGame:
    """Tests for cancel_game."""

    @pytest.mark.asyncio
    async def test_cancel_notifies_players(self, unit_env):
        lifecycle_service = await unit_env.get(LifecycleService)
        game_repo = await unit_env.get(GameRepository)
        recorder = await unit_env.get(RecordingNotificationDispatcher)
        player_id = UserId(uuid4())
        game = await game_repo.create(make_game(players=[player_id]))

        cancelled = await lifecycle_service.cancel_game(game.id, game.host_id)

        assert cancelled.status == GameStatus.CANCELLED
        assert [(n.user_id, n.type) for n in recorder.sent] == [
            (player_id, NotificationType.GAME_CANCELLED)
        ]

    @pytest.mark.asyncio
    async def test_only_host_cancels(self, unit_env):
        lifecycle_service = await unit_env.get(LifecycleService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game())

        with pytest.raises(NotHostError):
            await lifecycle_service.cancel_game(game.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_cancel_twice(self, unit_env):
        lifecycle_service = await unit_env.get(LifecycleService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game())
        await lifecycle_service.cancel_game(game.id, game.host_id)

        with pytest.raises(GameCancelledError):
            await lifecycle_service.cancel_game(game.id, game.host_id)


class TestListGames:
    """Tests for list_games."""

    @pytest.mark.asyncio
    async def test_defaults_to_open_games(self, unit_env):
        lifecycle_service = await unit_env.get(LifecycleService)
        game_repo = await unit_env.get(GameRepository)
        open_game = await game_repo.create(make_game())
        await game_repo.create(make_game(status=GameStatus.CANCELLED))

        games = await lifecycle_service.list_games()

        assert [g.id for g in games] == [open_game.id]


class TestTransitions:
    """Tests for the status helpers."""

    def test_upcoming_reads_as_ongoing_after_start(self):
        game = make_game(date=dt.date(2026, 5, 1))

        assert derive_effective_status(game, NOW) == GameStatus.UPCOMING
        assert (
            derive_effective_status(game, NOW + timedelta(hours=7))
            == GameStatus.ONGOING
        )

    def test_completed_is_terminal(self):
        game = transition(make_game(), GameStatus.COMPLETED, NOW)

        assert game.completed_at == NOW
        with pytest.raises(GameCompletedError):
            transition(game, GameStatus.CANCELLED, NOW)
