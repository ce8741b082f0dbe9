"""Response views shared by game use cases."""

import datetime as dt
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from gameon.domain.model.game import Game
from gameon.domain.service import derive_effective_status
from gameon.domain.value import GameStatus, Location, SkillLevel


class PlayerView(BaseModel):
    """Registered player in a game response."""

    user_id: str
    name: str
    image: Optional[str]
    skill_level: Optional[str]
    age: Optional[int]
    whatsapp: Optional[str]
    joined_at: datetime


class JoinRequestView(BaseModel):
    """Pending join request in a game response."""

    request_id: str
    user_id: str
    name: str
    image: Optional[str]
    skill_level: Optional[str]
    requested_at: datetime


class AttendanceView(BaseModel):
    """Attendance record in a game response."""

    user_id: str
    attended: bool
    marked_at: Optional[datetime]
    marked_by: Optional[str]


class GameResponse(BaseModel):
    """Game as returned to callers.

    ``status`` is the stored status; ``effective_status`` is what the game
    reads as right now (an upcoming game past its start is ongoing).
    """

    game_id: str
    host_id: str
    title: str
    sport: str
    description: str
    location: Location
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    max_players: int
    seats_left: int
    skill_level: SkillLevel
    min_skill_level: Optional[SkillLevel]
    image: str
    host_whatsapp: Optional[str]
    status: GameStatus
    effective_status: GameStatus
    registered_players: list[PlayerView]
    join_requests: list[JoinRequestView]
    attendance: list[AttendanceView]
    completed_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_game(cls, game: Game, now: Optional[datetime] = None) -> "GameResponse":
        """Build the response view for a game."""
        return cls(
            game_id=str(game.id),
            host_id=str(game.host_id),
            title=game.title,
            sport=game.sport.root,
            description=game.description,
            location=game.location,
            date=game.date,
            start_time=game.start_time,
            end_time=game.end_time,
            max_players=game.max_players,
            seats_left=game.seats_left,
            skill_level=game.skill_level,
            min_skill_level=game.min_skill_level,
            image=game.image,
            host_whatsapp=game.host_whatsapp,
            status=game.status,
            effective_status=derive_effective_status(game, now or datetime.now()),
            registered_players=[
                PlayerView(
                    user_id=str(p.user_id),
                    name=p.profile.name,
                    image=p.profile.image,
                    skill_level=p.profile.skill_level,
                    age=p.profile.age,
                    whatsapp=p.profile.whatsapp,
                    joined_at=p.joined_at,
                )
                for p in game.registered_players
            ],
            join_requests=[
                JoinRequestView(
                    request_id=str(r.id),
                    user_id=str(r.user_id),
                    name=r.profile.name,
                    image=r.profile.image,
                    skill_level=r.profile.skill_level,
                    requested_at=r.requested_at,
                )
                for r in game.join_requests
            ],
            attendance=[
                AttendanceView(
                    user_id=str(a.user_id),
                    attended=a.attended,
                    marked_at=a.marked_at,
                    marked_by=str(a.marked_by) if a.marked_by else None,
                )
                for a in game.attendance
            ],
            completed_at=game.completed_at,
            created_at=game.created_at,
            updated_at=game.updated_at,
        )


class GameListResponse(BaseModel):
    """A list of games."""

    games: list[GameResponse]
