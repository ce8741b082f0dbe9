"""Unit tests for GameWriter."""

from uuid import uuid4

import pytest

from gameon.config import GameSettings
from gameon.domain.error import NotFoundError, StaleGameError, ValidationError
from gameon.domain.model import Game
from gameon.domain.repository import GameRepository
from gameon.domain.service import GameWriter
from gameon.persistence.repository.inmemory import InMemoryGameRepository
from tests.conftest import make_game
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class AlwaysStaleGameRepository(InMemoryGameRepository):
    """Repository whose conditional write always loses."""

    def __init__(self) -> None:
        super().__init__()
        self.update_calls = 0

    async def update(self, game: Game, expected_version: int) -> Game:
        self.update_calls += 1
        raise StaleGameError(str(game.id), expected_version)


class TestApply:
    """Tests for apply."""

    @pytest.mark.asyncio
    async def test_apply_bumps_version(self, unit_env):
        game_writer = await unit_env.get(GameWriter)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game())

        before, after = await game_writer.apply(
            game.id, lambda g: g.evolve(title="Renamed")
        )

        assert before.version == 0
        assert after.version == 1
        assert (await game_repo.find_by_id(game.id)).title == "Renamed"

    @pytest.mark.asyncio
    async def test_noop_mutation_writes_nothing(self, unit_env):
        game_writer = await unit_env.get(GameWriter)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game())

        before, after = await game_writer.apply(game.id, lambda g: g)

        assert before is after
        assert (await game_repo.find_by_id(game.id)).version == 0

    @pytest.mark.asyncio
    async def test_mutation_error_propagates(self, unit_env):
        game_writer = await unit_env.get(GameWriter)
        game_repo = await unit_env.get(GameRepository)
        game = await game_repo.create(make_game())

        def refuse(g: Game) -> Game:
            raise ValidationError("nope")

        with pytest.raises(ValidationError):
            await game_writer.apply(game.id, refuse)

    @pytest.mark.asyncio
    async def test_missing_game(self, unit_env):
        game_writer = await unit_env.get(GameWriter)

        with pytest.raises(NotFoundError):
            await game_writer.apply(uuid4(), lambda g: g)

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        repo = AlwaysStaleGameRepository()
        game = await repo.create(make_game())
        game_writer = GameWriter(
            game_repository=repo, game_settings=GameSettings(max_write_attempts=2)
        )

        with pytest.raises(StaleGameError):
            await game_writer.apply(game.id, lambda g: g.evolve(title="Renamed"))
        assert repo.update_calls == 2
