"""Root conftest — shared test configuration."""

import pytest

from userhub.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached Settings so env overrides in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
