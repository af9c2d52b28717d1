"""Shared fixtures for the whole test suite."""

import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import providers


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate-limit counters."""
    get_limiter().reset()
    yield


@pytest.fixture
def fresh_providers():
    """Clear cached providers so environment overrides take effect."""
    cached = [
        providers.get_settings,
        providers.get_translation_loader,
        providers.get_translator,
        providers.get_locale_resolver,
    ]
    for provider in cached:
        provider.cache_clear()
    yield
    for provider in cached:
        provider.cache_clear()
