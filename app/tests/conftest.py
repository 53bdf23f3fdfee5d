"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.configuration import get_settings
from localekit.i18n.plurals import get_plural_rule


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset process-wide caches so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_plural_rule.cache_clear()
