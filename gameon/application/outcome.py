"""Operation outcome envelope.

Use cases raise domain errors; callers that need a uniform result (a
transport layer, a job runner) wrap the call with ``run_operation`` and
branch on ``error.kind`` instead of matching exception classes.
"""

from typing import Awaitable, Generic, Optional, TypeVar

import logfire
from pydantic import BaseModel

from gameon.domain.error import DomainError
from gameon.domain.value import ErrorKind

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Why an operation failed."""

    kind: ErrorKind
    code: str
    message: str


class Outcome(BaseModel, Generic[T]):
    """Result of running one operation."""

    success: bool
    message: str
    data: Optional[T] = None
    error: Optional[ErrorDetail] = None

    @classmethod
    def ok(cls, data: T, message: str = "OK") -> "Outcome[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: DomainError) -> "Outcome[T]":
        message = str(error) or error.code
        return cls(
            success=False,
            message=message,
            error=ErrorDetail(kind=error.kind, code=error.code, message=message),
        )


async def run_operation(
    operation: Awaitable[T], success_message: str = "OK"
) -> Outcome[T]:
    """Await a use case call and fold domain errors into an ``Outcome``.

    Only ``DomainError`` is folded; anything else is a bug or an
    infrastructure failure and propagates.

    Args:
        operation: Awaitable use case call, e.g. ``use_case.execute(request)``
        success_message: Message for the successful outcome

    Returns:
        Successful outcome carrying the result, or a failed one carrying the
        error kind and code
    """
    try:
        result = await operation
    except DomainError as e:
        logfire.warn(
            "Operation rejected",
            kind=e.kind.value,
            code=e.code,
            error=str(e),
        )
        return Outcome.fail(e)
    return Outcome.ok(result, success_message)
