"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For shared fakes, see tests/mocks/matcher_mocks.py
"""

import pytest

from core.config_loader import get_config


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as using the in-memory database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Tests that touch environment overrides must not leak cached config."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()
