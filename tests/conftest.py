"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import pytest

from displayfmt import FormatConfig


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models and formatting functions")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture
def utc_config() -> FormatConfig:
    """Config pinned to UTC so rendered times don't depend on the host."""
    return FormatConfig(time_zone="UTC")


@pytest.fixture
def new_york_config() -> FormatConfig:
    """Config pinned to America/New_York (UTC-4 in mid-March 2024)."""
    return FormatConfig(time_zone="America/New_York")
