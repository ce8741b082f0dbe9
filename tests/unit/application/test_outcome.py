"""Unit tests for the operation outcome envelope."""

import pytest

from gameon.application.outcome import run_operation
from gameon.domain.error import NotFoundError, SeatTakenError, UnauthorizedError
from gameon.domain.value import ErrorKind


async def _returns(value):
    return value


async def _raises(error: Exception):
    raise error


class TestRunOperation:
    """Tests for run_operation."""

    @pytest.mark.asyncio
    async def test_success(self):
        outcome = await run_operation(_returns(42), "Done")

        assert outcome.success
        assert outcome.message == "Done"
        assert outcome.data == 42
        assert outcome.error is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error, kind, code",
        [
            (UnauthorizedError(), ErrorKind.UNAUTHORIZED, "unauthorized"),
            (NotFoundError("Game", "x"), ErrorKind.NOT_FOUND, "not_found"),
            (SeatTakenError("g"), ErrorKind.CONFLICT, "seat_taken"),
        ],
    )
    async def test_domain_errors_fold_into_outcome(self, error, kind, code):
        outcome = await run_operation(_raises(error))

        assert not outcome.success
        assert outcome.data is None
        assert outcome.error.kind == kind
        assert outcome.error.code == code
        assert outcome.message == str(error)

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self):
        with pytest.raises(RuntimeError):
            await run_operation(_raises(RuntimeError("boom")))
