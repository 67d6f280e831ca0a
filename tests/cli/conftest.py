"""
Fixtures for CLI tests.
"""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def basic_config():
    """Keep CLI runs from replacing the handlers pytest captures logs with."""
    with patch("pkgmatchkit.cli.parser.logging.basicConfig") as mock_basic_config:
        yield mock_basic_config
