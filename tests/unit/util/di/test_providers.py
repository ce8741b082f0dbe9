"""Unit tests for provider selection and test container wiring."""

import pytest

from gameon.util.di import (
    NotificationProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)
from tests.di import MockNotificationProvider, MockPersistenceProvider, build_test_container


class TestProviderSelection:
    """Tests for ProviderBase.implementation."""

    def test_fixed_provider_is_its_own_implementation(self):
        assert not ProdConfigProvider.is_swappable()
        assert ProdConfigProvider.implementation(use_mock=True) is ProdConfigProvider

    def test_swappable_component_picks_by_mock_flag(self):
        assert PersistenceProvider.implementation() is ProdPersistenceProvider
        assert PersistenceProvider.implementation(use_mock=True) is MockPersistenceProvider
        assert NotificationProvider.implementation() is ProdNotificationProvider
        assert (
            NotificationProvider.implementation(use_mock=True)
            is MockNotificationProvider
        )


class TestBuildTestContainer:
    """Tests for unmock validation."""

    def test_unknown_component(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"payments"})

    def test_notification_requires_persistence(self):
        with pytest.raises(ValueError, match="requires"):
            build_test_container(unmock={"notification"})
