"""Unit tests for AttendanceService."""

import datetime as dt
from datetime import datetime
from uuid import uuid4

import pytest

from gameon.adapter.notification.dispatcher import RecordingNotificationDispatcher
from gameon.domain.error import (
    AttendanceNotOpenError,
    GameCompletedError,
    NotHostError,
    NotParticipantError,
    ValidationError,
)
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.service import AttendanceService, RosterService
from gameon.domain.value import GameStatus, NotificationType, UserId
from tests.conftest import make_game, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

GAME_DAY = dt.date(2026, 5, 1)
DURING_GAME = datetime(2026, 5, 1, 18, 30)


class TestMarkAttendance:
    """Tests for mark_attendance."""

    @pytest.mark.asyncio
    async def test_partial_marking_keeps_game_open(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        player_id = UserId(uuid4())
        game = await game_repo.create(make_game(players=[player_id], date=GAME_DAY))

        updated = await attendance_service.mark_attendance(
            game.id, game.host_id, player_ids=[player_id], now=DURING_GAME
        )

        assert updated.has_attended(player_id)
        assert not updated.has_attended(game.host_id)
        assert updated.status == GameStatus.UPCOMING

    @pytest.mark.asyncio
    async def test_final_mark_completes_game(self, unit_env):
        """Marking the last party completes the game in the same write."""
        # Arrange
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)
        recorder = await unit_env.get(RecordingNotificationDispatcher)

        host = await user_repo.save(make_user("Host"))
        player = await user_repo.save(make_user("Player"))
        game = await game_repo.create(
            make_game(host_id=host.id, players=[player.id], date=GAME_DAY)
        )
        await attendance_service.mark_attendance(
            game.id, host.id, player_ids=[player.id], now=DURING_GAME
        )

        # Act
        updated = await attendance_service.mark_attendance(
            game.id, host.id, player_ids=[host.id], now=DURING_GAME
        )

        # Assert
        assert updated.status == GameStatus.COMPLETED
        assert updated.completed_at == DURING_GAME
        assert updated.completed_by == host.id
        for user_id in (host.id, player.id):
            user = await user_repo.find_by_id(user_id)
            assert user.games_played == 1
            assert user.activity_for(game.id) is not None
        completed = [
            n.user_id for n in recorder.sent if n.type == NotificationType.GAME_COMPLETED
        ]
        assert set(completed) == {host.id, player.id}

    @pytest.mark.asyncio
    async def test_mark_all(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(
            make_game(players=[UserId(uuid4()), UserId(uuid4())], date=GAME_DAY)
        )

        updated = await attendance_service.mark_attendance(
            game.id, game.host_id, mark_all=True, now=DURING_GAME
        )

        assert updated.status == GameStatus.COMPLETED
        assert all(updated.has_attended(uid) for uid in updated.party_ids)

    @pytest.mark.asyncio
    async def test_marking_after_completion_is_rejected(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game(date=GAME_DAY))
        await attendance_service.mark_attendance(
            game.id, game.host_id, mark_all=True, now=DURING_GAME
        )

        with pytest.raises(GameCompletedError):
            await attendance_service.mark_attendance(
                game.id, game.host_id, mark_all=True, now=DURING_GAME
            )

    @pytest.mark.asyncio
    async def test_marking_before_start_is_rejected(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game(date=GAME_DAY))

        with pytest.raises(AttendanceNotOpenError):
            await attendance_service.mark_attendance(
                game.id,
                game.host_id,
                mark_all=True,
                now=datetime(2026, 5, 1, 17, 59),
            )

    @pytest.mark.asyncio
    async def test_requires_selector(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game(date=GAME_DAY))

        with pytest.raises(ValidationError):
            await attendance_service.mark_attendance(
                game.id, game.host_id, now=DURING_GAME
            )

    @pytest.mark.asyncio
    async def test_only_host_marks(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        player_id = UserId(uuid4())
        game = await game_repo.create(make_game(players=[player_id], date=GAME_DAY))

        with pytest.raises(NotHostError):
            await attendance_service.mark_attendance(
                game.id, player_id, player_ids=[player_id], now=DURING_GAME
            )

    @pytest.mark.asyncio
    async def test_unknown_target(self, unit_env):
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game(date=GAME_DAY))

        with pytest.raises(NotParticipantError):
            await attendance_service.mark_attendance(
                game.id, game.host_id, player_ids=[UserId(uuid4())], now=DURING_GAME
            )

    @pytest.mark.asyncio
    async def test_host_only_game_completes_on_host_mark(self, unit_env):
        """With no players, the host's own mark is the final one."""
        # Arrange
        attendance_service = await unit_env.get(AttendanceService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)
        host = await user_repo.save(make_user("Host"))
        game = await game_repo.create(make_game(host_id=host.id, date=GAME_DAY))

        # Act
        updated = await attendance_service.mark_attendance(
            game.id, host.id, player_ids=[host.id], now=DURING_GAME
        )

        # Assert
        assert updated.status == GameStatus.COMPLETED
        assert updated.completed_at == DURING_GAME
        assert updated.completed_by == host.id
        stored = await user_repo.find_by_id(host.id)
        assert stored.games_played == 1

    @pytest.mark.asyncio
    async def test_removed_player_no_longer_blocks_completion(self, unit_env):
        """Once the only unmarked player is removed, the next mark completes the game."""
        # Arrange
        attendance_service = await unit_env.get(AttendanceService)
        roster_service = await unit_env.get(RosterService)
        game_repo = await unit_env.get(GameRepository)
        user_repo = await unit_env.get(UserRepository)
        host = await user_repo.save(make_user("Host"))
        a = await user_repo.save(make_user("A"))
        b = await user_repo.save(make_user("B"))
        game = await game_repo.create(
            make_game(host_id=host.id, players=[a.id, b.id], date=GAME_DAY)
        )
        marked = await attendance_service.mark_attendance(
            game.id, host.id, player_ids=[host.id, a.id], now=DURING_GAME
        )
        assert marked.status == GameStatus.UPCOMING

        # Act
        trimmed = await roster_service.remove_participant(
            game.id, b.id, host.id, now=DURING_GAME
        )
        updated = await attendance_service.mark_attendance(
            game.id, host.id, player_ids=[a.id], now=DURING_GAME
        )

        # Assert
        assert not trimmed.is_participant(b.id)
        assert trimmed.attendance_for(b.id) is None
        assert updated.status == GameStatus.COMPLETED
        assert updated.attendance_for(b.id) is None
        assert set(updated.party_ids) == {host.id, a.id}
        removed = await user_repo.find_by_id(b.id)
        assert removed.games_played == 0
