"""Domain layer DI providers."""

from dishka import Scope, provide

from gameon.config import AuthSettings, GameSettings, RatingSettings
from gameon.domain.repository import GameRepository, UserRepository
from gameon.domain.service import (
    AttendanceService,
    GameWriter,
    HostTransferService,
    IdentityProvider,
    JWTService,
    LifecycleService,
    NotificationDispatcher,
    NotificationService,
    RatingService,
    RosterService,
)
from gameon.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_provider(self, jwt_service: JWTService) -> IdentityProvider:
        """Resolve callers through signed session tokens."""
        return jwt_service

    @provide
    def get_notification_service(
        self, dispatcher: NotificationDispatcher
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(dispatcher=dispatcher)

    @provide
    def get_game_writer(
        self, game_repository: GameRepository, game_settings: GameSettings
    ) -> GameWriter:
        """Provide the version-checked game writer."""
        return GameWriter(game_repository=game_repository, game_settings=game_settings)

    @provide
    def get_lifecycle_service(
        self,
        game_repository: GameRepository,
        game_writer: GameWriter,
        notification_service: NotificationService,
        game_settings: GameSettings,
    ) -> LifecycleService:
        """Provide game lifecycle domain service."""
        return LifecycleService(
            game_repository=game_repository,
            game_writer=game_writer,
            notification_service=notification_service,
            game_settings=game_settings,
        )

    @provide
    def get_roster_service(
        self,
        game_writer: GameWriter,
        game_repository: GameRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
    ) -> RosterService:
        """Provide roster domain service."""
        return RosterService(
            game_writer=game_writer,
            game_repository=game_repository,
            user_repository=user_repository,
            notification_service=notification_service,
        )

    @provide
    def get_host_transfer_service(
        self,
        game_writer: GameWriter,
        user_repository: UserRepository,
        notification_service: NotificationService,
    ) -> HostTransferService:
        """Provide host transfer domain service."""
        return HostTransferService(
            game_writer=game_writer,
            user_repository=user_repository,
            notification_service=notification_service,
        )

    @provide
    def get_attendance_service(
        self,
        game_writer: GameWriter,
        user_repository: UserRepository,
        notification_service: NotificationService,
        game_settings: GameSettings,
    ) -> AttendanceService:
        """Provide attendance domain service."""
        return AttendanceService(
            game_writer=game_writer,
            user_repository=user_repository,
            notification_service=notification_service,
            game_settings=game_settings,
        )

    @provide
    def get_rating_service(
        self,
        game_repository: GameRepository,
        user_repository: UserRepository,
        rating_settings: RatingSettings,
    ) -> RatingService:
        """Provide rating domain service."""
        return RatingService(
            game_repository=game_repository,
            user_repository=user_repository,
            rating_settings=rating_settings,
        )
