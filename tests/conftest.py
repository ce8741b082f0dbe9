"""Test configuration and fixtures."""

import datetime as dt
from datetime import datetime, timedelta
from typing import Iterable
from uuid import uuid4

from gameon.domain.model import Game, Participant, User
from gameon.domain.value import (
    GameId,
    Location,
    ProfileSnapshot,
    Sport,
    UserId,
)


def make_profile(name: str = "Player", whatsapp: str | None = None) -> ProfileSnapshot:
    """Profile snapshot with sensible defaults."""
    return ProfileSnapshot(name=name, skill_level="intermediate", whatsapp=whatsapp)


def make_user(name: str = "Player", **fields) -> User:
    """User with a fresh ID."""
    return User(id=UserId(uuid4()), name=name, **fields)


def make_game(
    host_id: UserId | None = None,
    players: Iterable[UserId] = (),
    max_players: int = 4,
    date: dt.date | None = None,
    **fields,
) -> Game:
    """Game with a fresh ID, scheduled two days ahead by default.

    Args:
        host_id: Host (random if omitted)
        players: Users already registered
        max_players: Capacity including the host
        date: Game date
        **fields: Any other Game field
    """
    return Game(
        id=GameId(uuid4()),
        host_id=host_id or UserId(uuid4()),
        title="Sunday Football",
        sport=Sport("football"),
        description="Friendly five-a-side",
        location=Location(address="https://maps.example.com/park", city="Dublin"),
        date=date or (datetime.now() + timedelta(days=2)).date(),
        start_time=dt.time(18, 0),
        end_time=dt.time(20, 0),
        max_players=max_players,
        registered_players=[
            Participant(user_id=uid, profile=make_profile()) for uid in players
        ],
        **fields,
    )


def past_date() -> dt.date:
    """A date whose games have already started."""
    return (datetime.now() - timedelta(days=1)).date()
