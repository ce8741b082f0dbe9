"""Domain services."""

from .attendance_service import AttendanceService
from .base import Service
from .game_writer import GameWriter
from .host_transfer_service import HostTransferService
from .jwt_service import IdentityProvider, JWTService
from .lifecycle_service import LifecycleService, derive_effective_status
from .notification_service import NotificationDispatcher, NotificationService
from .rating_service import RateableGame, RatingService
from .roster_service import RosterService

__all__ = [
    "AttendanceService",
    "GameWriter",
    "HostTransferService",
    "IdentityProvider",
    "JWTService",
    "LifecycleService",
    "NotificationDispatcher",
    "NotificationService",
    "RateableGame",
    "RatingService",
    "RosterService",
    "Service",
    "derive_effective_status",
]
