"""
Package metadata matchers.

Each matcher takes a subject and expected values and returns a Verdict;
failed assertions are reported, never raised.

Available Components:
--------------------
- Verdict: Pass/fail plus message
- to_depend_on / to_dev_depend_on / to_peer_depend_on /
  to_optionally_depend_on: Dependency matchers
- to_binary_link: Binary-link matcher
- MATCHERS / get_matcher: Lookup by framework name ('toDependOn', ...)
"""

from pkgmatchkit.matchers.verdict import Verdict
from pkgmatchkit.matchers.dependency import (
    DependencyMatcher,
    to_depend_on,
    to_dev_depend_on,
    to_peer_depend_on,
    to_optionally_depend_on,
)
from pkgmatchkit.matchers.binary_links import expand_links, to_binary_link
from pkgmatchkit.matchers.registry import MATCHERS, get_matcher

__all__ = [
    "Verdict",
    "DependencyMatcher",
    "to_depend_on",
    "to_dev_depend_on",
    "to_peer_depend_on",
    "to_optionally_depend_on",
    "expand_links",
    "to_binary_link",
    "MATCHERS",
    "get_matcher",
]
