"""Create game use case."""

import datetime as dt
from typing import Optional

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gameon.application.usecase.base import authenticate
from gameon.application.usecase.views import GameResponse
from gameon.domain.error import ValidationError
from gameon.domain.service import IdentityProvider, LifecycleService
from gameon.domain.value import Coordinates, Location, SkillLevel


class LocationInput(BaseModel):
    """Location fields of a new game."""

    address: str = ""  # Maps link
    city: Optional[str] = None
    country: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    def to_location(self) -> Location:
        """Build the domain location, raising ``ValidationError``."""
        if not self.address.strip():
            raise ValidationError("Location is required")
        try:
            coordinates = None
            if self.lat is not None and self.lng is not None:
                coordinates = Coordinates(lat=self.lat, lng=self.lng)
            return Location(
                address=self.address.strip(),
                city=self.city,
                country=self.country,
                coordinates=coordinates,
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid location: {e}") from e


class CreateGameRequest(BaseModel):
    """Create game request."""

    auth_token: Optional[str] = None
    title: str
    sport: str
    description: str
    location: LocationInput
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    max_players: int
    skill_level: SkillLevel = SkillLevel.ALL
    min_skill_level: Optional[SkillLevel] = None
    image: Optional[str] = None
    host_whatsapp: Optional[str] = None


class CreateGameUseCase:
    """Use case for creating a game hosted by the caller."""

    def __init__(
        self,
        lifecycle_service: LifecycleService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize create game use case.

        Args:
            lifecycle_service: Lifecycle domain service
            identity_provider: Resolves the caller from the token
        """
        self.lifecycle_service = lifecycle_service
        self.identity_provider = identity_provider

    async def execute(self, request: CreateGameRequest) -> GameResponse:
        """Execute create game flow.

        Args:
            request: Create game request

        Returns:
            The created game, ``upcoming`` with the caller as host

        Raises:
            UnauthorizedError: If the token is missing or invalid
            ValidationError: If the payload breaks scheduling rules
        """
        host_id = authenticate(self.identity_provider, request.auth_token)

        with logfire.span(
            "create_game.execute", host_id=str(host_id), sport=request.sport
        ):
            game = await self.lifecycle_service.create_game(
                host_id=host_id,
                title=request.title,
                sport=request.sport,
                description=request.description,
                location=request.location.to_location(),
                date=request.date,
                start_time=request.start_time,
                end_time=request.end_time,
                max_players=request.max_players,
                skill_level=request.skill_level,
                min_skill_level=request.min_skill_level,
                image=request.image,
                host_whatsapp=request.host_whatsapp,
            )
            return GameResponse.from_game(game)
