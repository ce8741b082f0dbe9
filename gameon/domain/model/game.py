"""Game aggregate root.

A game is one scheduled pickup-sport session. The host owns every roster,
attendance and lifecycle mutation; the aggregate is the unit of consistency
and every write to it is version-checked by the repository.
"""

import datetime as dt
from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field, model_validator

from gameon.domain.error import RequestNotFoundError
from gameon.domain.model.common import DomainModel
from gameon.domain.value import (
    GameId,
    GameStatus,
    Location,
    ProfileSnapshot,
    RequestId,
    SkillLevel,
    Sport,
    UserId,
)

DEFAULT_GAME_IMAGE = "/default-game.jpg"


class Participant(DomainModel):
    """A user accepted into the game (never the host)."""

    user_id: UserId
    profile: ProfileSnapshot
    joined_at: datetime = Field(default_factory=datetime.now)


class JoinRequest(DomainModel):
    """A pending request to become a participant.

    Created by a join, destroyed by accept or reject. Never edited.
    """

    id: RequestId
    user_id: UserId
    profile: ProfileSnapshot
    requested_at: datetime = Field(default_factory=datetime.now)


class AttendanceRecord(DomainModel):
    """Host-recorded presence of one party."""

    user_id: UserId
    attended: bool = False
    marked_at: Optional[datetime] = None
    marked_by: Optional[UserId] = None


class Game(DomainModel):
    """Game aggregate root.

    Invariants (checked on every construction, including ``evolve``):
    - the host is never a registered player and never has a pending request
    - registered players and join requests are each unique by user, and no
      user appears in both
    - ``seats_left`` (which reserves the host's own seat) is never negative
    - attendance holds at most one record per party
    - ``completed_at`` is set exactly when the game is completed
    """

    id: GameId
    host_id: UserId
    title: str = Field(min_length=1, max_length=200)
    sport: Sport
    description: str = Field(min_length=1, max_length=5000)
    location: Location
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    max_players: int = Field(ge=2)
    skill_level: SkillLevel = SkillLevel.ALL
    min_skill_level: Optional[SkillLevel] = None
    image: str = DEFAULT_GAME_IMAGE
    host_whatsapp: Optional[str] = None
    status: GameStatus = GameStatus.UPCOMING
    registered_players: list[Participant] = Field(default_factory=list)
    join_requests: list[JoinRequest] = Field(default_factory=list)
    attendance: list[AttendanceRecord] = Field(default_factory=list)
    completed_at: Optional[datetime] = None
    completed_by: Optional[UserId] = None
    cancelled_at: Optional[datetime] = None
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def seats_left(self) -> int:
        """Unclaimed seats, excluding the host's reserved seat."""
        return self.max_players - len(self.registered_players) - 1

    @property
    def scheduled_start(self) -> datetime:
        """Start of the session as a single timestamp."""
        return datetime.combine(self.date, self.start_time)

    @property
    def scheduled_end(self) -> datetime:
        """End of the session as a single timestamp."""
        return datetime.combine(self.date, self.end_time)

    @property
    def party_ids(self) -> list[UserId]:
        """Host followed by every registered player."""
        return [self.host_id, *(p.user_id for p in self.registered_players)]

    def is_host(self, user_id: UserId) -> bool:
        return self.host_id == user_id

    def is_participant(self, user_id: UserId) -> bool:
        return self.find_participant(user_id) is not None

    def is_party(self, user_id: UserId) -> bool:
        """Whether the user is the host or a registered player."""
        return self.is_host(user_id) or self.is_participant(user_id)

    def find_participant(self, user_id: UserId) -> Optional[Participant]:
        for participant in self.registered_players:
            if participant.user_id == user_id:
                return participant
        return None

    def find_request(self, request_id: RequestId) -> Optional[JoinRequest]:
        for request in self.join_requests:
            if request.id == request_id:
                return request
        return None

    def require_request(self, request_id: RequestId) -> JoinRequest:
        """Get a pending request or raise ``RequestNotFoundError``."""
        request = self.find_request(request_id)
        if request is None:
            raise RequestNotFoundError(str(request_id))
        return request

    def pending_request_for(self, user_id: UserId) -> Optional[JoinRequest]:
        for request in self.join_requests:
            if request.user_id == user_id:
                return request
        return None

    def attendance_for(self, user_id: UserId) -> Optional[AttendanceRecord]:
        for record in self.attendance:
            if record.user_id == user_id:
                return record
        return None

    def has_attended(self, user_id: UserId) -> bool:
        record = self.attendance_for(user_id)
        return record is not None and record.attended

    @property
    def everyone_attended(self) -> bool:
        """Whether every current party has an ``attended`` record."""
        return all(self.has_attended(user_id) for user_id in self.party_ids)

    @model_validator(mode="after")
    def validate_roster(self) -> "Game":
        """Enforce roster and lifecycle invariants."""
        player_ids = [p.user_id for p in self.registered_players]
        request_ids = [r.user_id for r in self.join_requests]

        if self.host_id in player_ids:
            raise ValueError("Host cannot be a registered player")
        if self.host_id in request_ids:
            raise ValueError("Host cannot have a pending join request")
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("Registered players must be unique")
        if len(set(request_ids)) != len(request_ids):
            raise ValueError("Join requests must be unique per user")
        if set(player_ids) & set(request_ids):
            raise ValueError("A user cannot be both a player and a requester")
        if self.seats_left < 0:
            raise ValueError(
                f"Roster of {len(player_ids)} player(s) exceeds max_players "
                f"{self.max_players}"
            )

        attendance_ids = [a.user_id for a in self.attendance]
        if len(set(attendance_ids)) != len(attendance_ids):
            raise ValueError("Attendance must hold one record per party")
        parties = {self.host_id, *player_ids}
        if not set(attendance_ids) <= parties:
            raise ValueError("Attendance recorded for a user outside the game")

        if (self.status == GameStatus.COMPLETED) != (self.completed_at is not None):
            raise ValueError("completed_at must be set exactly when completed")
        return self
