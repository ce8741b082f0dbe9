"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from gameon.adapter.notification.dispatcher import RecordingNotificationDispatcher
from gameon.domain.service import NotificationService
from gameon.domain.value import NotificationType, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotify:
    """Tests for notify and notify_many."""

    @pytest.mark.asyncio
    async def test_notify_dispatches(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recorder = await unit_env.get(RecordingNotificationDispatcher)
        user_id = UserId(uuid4())

        await notification_service.notify(
            user_id, NotificationType.HOST_ASSIGNED, "Title", "Body"
        )

        assert len(recorder.sent) == 1
        assert recorder.sent[0].user_id == user_id
        assert not recorder.sent[0].read

    @pytest.mark.asyncio
    async def test_dispatch_failure_is_swallowed(self, unit_env):
        """Delivery failures never fail the calling operation."""
        notification_service = await unit_env.get(NotificationService)
        recorder = await unit_env.get(RecordingNotificationDispatcher)
        recorder.fail_with = RuntimeError("push gateway down")

        await notification_service.notify_many(
            [UserId(uuid4()), UserId(uuid4())],
            NotificationType.GAME_CANCELLED,
            "Game Cancelled",
            "Body",
        )

        assert recorder.sent == []
