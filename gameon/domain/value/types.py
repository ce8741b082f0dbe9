"""Domain value objects for GameOn.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from gameon.domain.value.common import RootValueObject, ValueObject
from gameon.domain.value.sports import SPORTS


class ErrorKind(str, Enum):
    """Caller-visible failure categories."""

    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    CONFLICT = "conflict"
    VALIDATION = "validation"


class GameStatus(str, Enum):
    """Lifecycle status of a game.

    ``upcoming -> ongoing -> completed``, with ``cancelled`` reachable from
    either pre-completed state. ``completed`` and ``cancelled`` are terminal.
    """

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Whether no transition can leave this status."""
        return self in (GameStatus.COMPLETED, GameStatus.CANCELLED)

    def can_transition_to(self, target: "GameStatus") -> bool:
        """Check whether moving to ``target`` is a legal lifecycle step."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[GameStatus, frozenset[GameStatus]] = {
    GameStatus.UPCOMING: frozenset(
        {GameStatus.ONGOING, GameStatus.COMPLETED, GameStatus.CANCELLED}
    ),
    GameStatus.ONGOING: frozenset({GameStatus.COMPLETED, GameStatus.CANCELLED}),
    GameStatus.COMPLETED: frozenset(),
    GameStatus.CANCELLED: frozenset(),
}


class SkillLevel(str, Enum):
    """Skill level a game is aimed at."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ALL = "all"


class NotificationType(str, Enum):
    """Kinds of notification emitted by game operations."""

    JOIN_REQUEST_ACCEPTED = "join_request_accepted"
    JOIN_REQUEST_REJECTED = "join_request_rejected"
    JOIN_REQUEST_SENT = "join_request_sent"
    NEW_JOIN_REQUEST = "new_join_request"
    GAME_CANCELLED = "game_cancelled"
    PLAYER_LEFT = "player_left"
    HOST_ASSIGNED = "host_assigned"
    GAME_ATTENDED = "game_attended"
    GAME_COMPLETED = "game_completed"


class Sport(RootValueObject[str]):
    """Sport or activity slug, e.g. 'football', 'table-tennis'."""

    @field_validator("root")
    @classmethod
    def validate_sport(cls, v: str) -> str:
        """Validate sport is a known activity."""
        if v not in SPORTS:
            raise ValueError(f"Unknown sport: {v}")
        return v

    @property
    def display_name(self) -> str:
        """Human readable sport name."""
        return self.root.replace("-", " ").title()


class Coordinates(ValueObject):
    """Latitude/longitude pair."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Location(ValueObject):
    """Where a game takes place.

    ``address`` holds the maps link shared with players.
    """

    address: str = Field(min_length=1)
    city: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class ProfileSnapshot(ValueObject):
    """Display fields copied from a user at join time.

    Deliberately a snapshot: later profile edits do not flow back into
    existing participant or request records.
    """

    name: str = Field(min_length=1)
    image: Optional[str] = None
    skill_level: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)
    whatsapp: Optional[str] = None


class AuthenticatedUser(ValueObject):
    """Identity resolved from a session token."""

    id: str
