"""Unit tests for provider selection."""

import pytest

from showcase.util.di import (
    PROVIDERS,
    ProdConfigProvider,
    ProviderBase,
    get_provider,
)
from showcase.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from showcase.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider
from tests.di.container import build_test_container


class TestGetProvider:
    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_production_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_selects_mock_implementation(self):
        assert get_provider(PersistenceProvider, use_mock=True) is (
            MockPersistenceProvider
        )

    def test_missing_implementation_raises(self):
        class SearchProvider(ProviderBase):
            __mock_component__ = "search"

        class ProdSearchProvider(SearchProvider):
            __is_mock__ = False

        with pytest.raises(DependencyInjectionError, match="No mock implementation"):
            get_provider(SearchProvider, use_mock=True)

    def test_persistence_is_registered(self):
        assert PersistenceProvider in PROVIDERS


class TestBuildTestContainer:
    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})
