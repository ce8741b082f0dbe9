"""Mock notification providers for testing."""

from dishka import Scope, provide

from gameon.adapter.notification.dispatcher import RecordingNotificationDispatcher
from gameon.domain.service import NotificationDispatcher
from gameon.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider that records instead of delivering.

    Tests fetch ``RecordingNotificationDispatcher`` to inspect what was sent;
    the same instance is bound to ``NotificationDispatcher``.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_recording_dispatcher(self) -> RecordingNotificationDispatcher:
        """Provide the recording dispatcher."""
        return RecordingNotificationDispatcher()

    @provide(scope=Scope.REQUEST)
    def get_dispatcher(
        self, recorder: RecordingNotificationDispatcher
    ) -> NotificationDispatcher:
        """Bind the recorder as the dispatcher."""
        return recorder
