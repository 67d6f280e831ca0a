"""
Test-framework integration for pkgmatchkit.

This package provides custom assertions, the expect() helper and pytest
fixtures built on the matchers.
"""

from .assertions import (
    assert_verdict,
    assert_depends_on,
    assert_dev_depends_on,
    assert_peer_depends_on,
    assert_optionally_depends_on,
    assert_binary_links,
)
from .expect import Expectation, expect

__all__ = [
    "assert_verdict",
    "assert_depends_on",
    "assert_dev_depends_on",
    "assert_peer_depends_on",
    "assert_optionally_depends_on",
    "assert_binary_links",
    "Expectation",
    "expect",
]
