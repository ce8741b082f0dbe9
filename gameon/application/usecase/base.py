"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from gameon.domain.error import ValidationError
from gameon.domain.service import IdentityProvider
from gameon.domain.value import UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, label: str) -> UUID:
    """Parse a UUID string from a request, raising ``ValidationError``."""
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {label}: {value!r}")


def authenticate(identity_provider: IdentityProvider, token: Optional[str]) -> UserId:
    """Resolve the calling user's ID or raise ``UnauthorizedError``."""
    user = identity_provider.require_auth(token)
    return UserId(UUID(user.id))
