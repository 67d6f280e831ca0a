"""
Pytest configuration and shared fixtures for pkgmatchkit tests.
"""

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from pkgmatchkit.testing.plugin import package_factory, pkg_expect
from tests.fixtures.packages import (
    app_manifest,
    cli_package,
    scoped_package,
)

from pkgmatchkit.core.platform import clear_platform_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(autouse=True)
def _reset_caches():
    """Each test sees a freshly detected platform."""
    clear_platform_cache()
    yield
    clear_platform_cache()
