"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from gameon.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically. Callers
    open a request scope per operation:

        async with container() as request_container:
            use_case = await request_container.get(RequestJoinUseCase)

    Returns:
        Configured DI container with production providers
    """
    return make_async_container(*(base.implementation()() for base in PROVIDERS))
