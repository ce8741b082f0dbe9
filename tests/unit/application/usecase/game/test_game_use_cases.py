"""Unit tests for game use cases."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from gameon.application.usecase.game import (
    CancelGameRequest,
    CancelGameUseCase,
    CreateGameRequest,
    CreateGameUseCase,
    GetGameRequest,
    GetGameUseCase,
    ListGamesRequest,
    ListGamesUseCase,
    LocationInput,
)
from gameon.domain.error import NotFoundError, UnauthorizedError, ValidationError
from gameon.domain.service import JWTService
from gameon.domain.value import GameStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _create_request(token: str | None, **overrides) -> CreateGameRequest:
    fields = dict(
        auth_token=token,
        title="Thursday Hoops",
        sport="basketball",
        description="Half court, all welcome",
        location=LocationInput(
            address="https://maps.example.com/court", lat=53.3, lng=-6.2
        ),
        date=(datetime.now() + timedelta(days=3)).date(),
        start_time="19:00",
        end_time="21:00",
        max_players=6,
    )
    fields.update(overrides)
    return CreateGameRequest(**fields)


class TestCreateGameUseCase:
    """Tests for CreateGameUseCase."""

    @pytest.mark.asyncio
    async def test_create_game(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateGameUseCase)
        jwt_service = await unit_env.get(JWTService)
        host_id = str(uuid4())

        # Act
        response = await use_case.execute(
            _create_request(jwt_service.create_token(host_id))
        )

        # Assert
        assert response.host_id == host_id
        assert response.status == GameStatus.UPCOMING
        assert response.effective_status == GameStatus.UPCOMING
        assert response.seats_left == 5
        assert response.location.coordinates.lat == 53.3
        assert response.registered_players == []

    @pytest.mark.asyncio
    async def test_create_game_requires_auth(self, unit_env):
        use_case = await unit_env.get(CreateGameUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(_create_request(None))

    @pytest.mark.asyncio
    async def test_create_game_requires_location(self, unit_env):
        use_case = await unit_env.get(CreateGameUseCase)
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(ValidationError, match="Location is required"):
            await use_case.execute(
                _create_request(
                    jwt_service.create_token(str(uuid4())),
                    location=LocationInput(address=" "),
                )
            )


class TestReadAndCancel:
    """Tests for GetGameUseCase, ListGamesUseCase and CancelGameUseCase."""

    @pytest.mark.asyncio
    async def test_get_list_and_cancel(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateGameUseCase)
        get = await unit_env.get(GetGameUseCase)
        list_games = await unit_env.get(ListGamesUseCase)
        cancel = await unit_env.get(CancelGameUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(uuid4()))
        created = await create.execute(_create_request(token))

        # Act
        fetched = await get.execute(GetGameRequest(game_id=created.game_id))
        listed = await list_games.execute(ListGamesRequest(sport="basketball"))
        cancelled = await cancel.execute(
            CancelGameRequest(auth_token=token, game_id=created.game_id)
        )
        after_cancel = await list_games.execute(ListGamesRequest())

        # Assert
        assert fetched.game_id == created.game_id
        assert [g.game_id for g in listed.games] == [created.game_id]
        assert cancelled.status == GameStatus.CANCELLED
        assert after_cancel.games == []

    @pytest.mark.asyncio
    async def test_get_unknown_game(self, unit_env):
        get = await unit_env.get(GetGameUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetGameRequest(game_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_get_with_malformed_id(self, unit_env):
        get = await unit_env.get(GetGameUseCase)

        with pytest.raises(ValidationError, match="Invalid game ID"):
            await get.execute(GetGameRequest(game_id="not-a-uuid"))
