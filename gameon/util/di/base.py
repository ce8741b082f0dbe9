"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["notification", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a swappable component: exactly one
    subclass is the production implementation and one is the mock (the
    mock lives with the tests and registers itself by subclassing).

    Attributes:
        __mock_component__: Component name, None for fixed providers
        __depends_on__: Components that must be real when this one is
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the concrete provider class for this component.

        Raises:
            ValueError: If the requested implementation is not registered
        """
        if not cls.is_swappable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
