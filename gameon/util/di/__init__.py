"""Dependency injection wiring for GameOn."""

from gameon.util.di.application import ProdApplicationProvider
from gameon.util.di.base import Component, ProviderBase
from gameon.util.di.core import ProdConfigProvider
from gameon.util.di.domain import ProdDomainProvider
from gameon.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)

# Fixed providers first, then swappable components
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    NotificationProvider,
]

__all__ = [
    "PROVIDERS",
    "Component",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
]
