"""User entity and per-game activity history.

Users own their own rating history: ratings given and received live on the
user, not on the game, so one rating write touches two users.
"""

import datetime as dt
from datetime import datetime
from typing import Optional

from pydantic import Field

from gameon.domain.model.common import DomainModel
from gameon.domain.value import GameId, ProfileSnapshot, Sport, UserId


class RatingReceived(DomainModel):
    """One peer rating received for one game."""

    from_user_id: UserId
    rating: int = Field(ge=1, le=5)
    comment: str = ""
    created_at: datetime = Field(default_factory=datetime.now)


class ActivityEntry(DomainModel):
    """A user's record of one game they took part in."""

    game_id: GameId
    sport: Sport
    date: dt.date
    attended: bool = True
    rating_given: bool = False
    players_rated: list[UserId] = Field(default_factory=list)
    ratings_received: list[RatingReceived] = Field(default_factory=list)


class User(DomainModel):
    """User entity.

    ``average_rating`` and ``total_ratings`` summarize every
    ``ratings_received`` entry across the whole activity history.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    email: Optional[str] = None
    image: Optional[str] = None
    skill_level: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)
    whatsapp: Optional[str] = None
    games_played: int = Field(default=0, ge=0)
    average_rating: float = Field(default=0.0, ge=0, le=5)
    total_ratings: int = Field(default=0, ge=0)
    activity_history: list[ActivityEntry] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def activity_for(self, game_id: GameId) -> Optional[ActivityEntry]:
        for entry in self.activity_history:
            if entry.game_id == game_id:
                return entry
        return None

    def has_rated(self, game_id: GameId, ratee_id: UserId) -> bool:
        """Whether this user already rated ``ratee_id`` for the game."""
        entry = self.activity_for(game_id)
        return entry is not None and ratee_id in entry.players_rated

    def has_rating_from(self, game_id: GameId, rater_id: UserId) -> bool:
        """Whether this user already holds a rating from ``rater_id``."""
        entry = self.activity_for(game_id)
        if entry is None:
            return False
        return any(r.from_user_id == rater_id for r in entry.ratings_received)

    def profile_snapshot(self) -> ProfileSnapshot:
        """Capture the display fields copied into roster records."""
        return ProfileSnapshot(
            name=self.name,
            image=self.image,
            skill_level=self.skill_level,
            age=self.age,
            whatsapp=self.whatsapp,
        )
