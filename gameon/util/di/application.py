"""Application layer DI providers."""

from dishka import Scope, provide

from gameon.application.usecase.attendance import MarkAttendanceUseCase
from gameon.application.usecase.game import (
    CancelGameUseCase,
    CreateGameUseCase,
    GetGameUseCase,
    ListGamesUseCase,
)
from gameon.application.usecase.host import TransferHostUseCase
from gameon.application.usecase.rating import (
    ListCompletedGamesUseCase,
    RatePlayerUseCase,
)
from gameon.application.usecase.roster import (
    AcceptJoinRequestUseCase,
    LeaveGameUseCase,
    ListPendingRequestsUseCase,
    RejectJoinRequestUseCase,
    RemoveParticipantUseCase,
    RequestJoinUseCase,
)
from gameon.domain.service import (
    AttendanceService,
    HostTransferService,
    IdentityProvider,
    LifecycleService,
    RatingService,
    RosterService,
)
from gameon.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Game use cases
    @provide(scope=Scope.REQUEST)
    def get_create_game_use_case(
        self,
        lifecycle_service: LifecycleService,
        identity_provider: IdentityProvider,
    ) -> CreateGameUseCase:
        """Provide create game use case."""
        return CreateGameUseCase(
            lifecycle_service=lifecycle_service,
            identity_provider=identity_provider,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_game_use_case(
        self, lifecycle_service: LifecycleService
    ) -> GetGameUseCase:
        """Provide get game use case."""
        return GetGameUseCase(lifecycle_service=lifecycle_service)

    @provide(scope=Scope.REQUEST)
    def get_list_games_use_case(
        self, lifecycle_service: LifecycleService
    ) -> ListGamesUseCase:
        """Provide list games use case."""
        return ListGamesUseCase(lifecycle_service=lifecycle_service)

    @provide(scope=Scope.REQUEST)
    def get_cancel_game_use_case(
        self,
        lifecycle_service: LifecycleService,
        identity_provider: IdentityProvider,
    ) -> CancelGameUseCase:
        """Provide cancel game use case."""
        return CancelGameUseCase(
            lifecycle_service=lifecycle_service,
            identity_provider=identity_provider,
        )

    # Roster use cases
    @provide(scope=Scope.REQUEST)
    def get_request_join_use_case(
        self, roster_service: RosterService, identity_provider: IdentityProvider
    ) -> RequestJoinUseCase:
        """Provide request join use case."""
        return RequestJoinUseCase(
            roster_service=roster_service, identity_provider=identity_provider
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_join_request_use_case(
        self, roster_service: RosterService, identity_provider: IdentityProvider
    ) -> AcceptJoinRequestUseCase:
        """Provide accept join request use case."""
        return AcceptJoinRequestUseCase(
            roster_service=roster_service, identity_provider=identity_provider
        )

    @provide(scope=Scope.REQUEST)
    def get_reject_join_request_use_case(
        self, roster_service: RosterService, identity_provider: IdentityProvider
    ) -> RejectJoinRequestUseCase:
        """Provide reject join request use case."""
        return RejectJoinRequestUseCase(
            roster_service=roster_service, identity_provider=identity_provider
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_participant_use_case(
        self, roster_service: RosterService, identity_provider: IdentityProvider
    ) -> RemoveParticipantUseCase:
        """Provide remove participant use case."""
        return RemoveParticipantUseCase(
            roster_service=roster_service, identity_provider=identity_provider
        )

    @provide(scope=Scope.REQUEST)
    def get_leave_game_use_case(
        self, roster_service: RosterService, identity_provider: IdentityProvider
    ) -> LeaveGameUseCase:
        """Provide leave game use case."""
        return LeaveGameUseCase(
            roster_service=roster_service, identity_provider=identity_provider
        )

    @provide(scope=Scope.REQUEST)
    def get_list_pending_requests_use_case(
        self, roster_service: RosterService, identity_provider: IdentityProvider
    ) -> ListPendingRequestsUseCase:
        """Provide list pending requests use case."""
        return ListPendingRequestsUseCase(
            roster_service=roster_service, identity_provider=identity_provider
        )

    # Host use cases
    @provide(scope=Scope.REQUEST)
    def get_transfer_host_use_case(
        self,
        host_transfer_service: HostTransferService,
        identity_provider: IdentityProvider,
    ) -> TransferHostUseCase:
        """Provide transfer host use case."""
        return TransferHostUseCase(
            host_transfer_service=host_transfer_service,
            identity_provider=identity_provider,
        )

    # Attendance use cases
    @provide(scope=Scope.REQUEST)
    def get_mark_attendance_use_case(
        self,
        attendance_service: AttendanceService,
        identity_provider: IdentityProvider,
    ) -> MarkAttendanceUseCase:
        """Provide mark attendance use case."""
        return MarkAttendanceUseCase(
            attendance_service=attendance_service,
            identity_provider=identity_provider,
        )

    # Rating use cases
    @provide(scope=Scope.REQUEST)
    def get_rate_player_use_case(
        self, rating_service: RatingService, identity_provider: IdentityProvider
    ) -> RatePlayerUseCase:
        """Provide rate player use case."""
        return RatePlayerUseCase(
            rating_service=rating_service, identity_provider=identity_provider
        )

    @provide(scope=Scope.REQUEST)
    def get_list_completed_games_use_case(
        self, rating_service: RatingService, identity_provider: IdentityProvider
    ) -> ListCompletedGamesUseCase:
        """Provide list completed games use case."""
        return ListCompletedGamesUseCase(
            rating_service=rating_service, identity_provider=identity_provider
        )
