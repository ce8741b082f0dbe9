"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and validators re-run.

        Unlike ``model_copy(update=...)`` this re-checks every field and
        model-level invariant, so an illegal state cannot be produced.
        """
        return type(self)(**{**dict(self), **changes})
