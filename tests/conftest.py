"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from versioning.cache.store import VersionCache
from versioning.config.settings import settings


class FakeClock:
    """
    Controllable time source for fallback tests.

    Usage:
        clock = FakeClock(1000.0)
        cache = VersionCache(clock=clock)
        clock.advance(5)
    """

    def __init__(self, now: float = 1700000000.0):
        self.now = now
        self.calls = 0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        self.calls += 1
        return self.now


# ============================================================================
# VersionCache Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock pinned at a known timestamp."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> VersionCache:
    """Create a fresh VersionCache driven by the fake clock."""
    return VersionCache(clock=clock)


@pytest.fixture
def real_cache() -> VersionCache:
    """Create a fresh VersionCache using the wall clock."""
    return VersionCache()


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def static_setting(monkeypatch):
    """
    Factory fixture to set the process-wide static version.

    Usage:
        def test_something(static_setting):
            static_setting("2.0.0")
    """
    def factory(value: str) -> None:
        monkeypatch.setattr(settings, "STATIC_VERSION", value)
    return factory


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Reset settings that tests depend on, regardless of environment."""
    monkeypatch.setattr(settings, "STATIC_VERSION", "")
    monkeypatch.setattr(settings, "QUERY_PARAM", "v")
    monkeypatch.setattr(settings, "DEBUG", False)
    monkeypatch.setattr(settings, "LOG_LEVEL", "INFO")


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "concurrency: marks tests that share a cache across tasks or threads"
    )
