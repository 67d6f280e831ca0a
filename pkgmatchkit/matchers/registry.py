"""
Registry of matchers by framework name.
"""

from typing import Callable, Dict

from pkgmatchkit.core.exceptions import UnknownMatcherError
from pkgmatchkit.matchers.binary_links import to_binary_link
from pkgmatchkit.matchers.dependency import (
    to_depend_on,
    to_dev_depend_on,
    to_optionally_depend_on,
    to_peer_depend_on,
)
from pkgmatchkit.matchers.verdict import Verdict

MATCHERS: Dict[str, Callable[..., Verdict]] = {
    "toDependOn": to_depend_on,
    "toDevDependOn": to_dev_depend_on,
    "toPeerDependOn": to_peer_depend_on,
    "toOptionallyDependOn": to_optionally_depend_on,
    "toBinaryLink": to_binary_link,
}


def get_matcher(name: str) -> Callable[..., Verdict]:
    """
    Look up a matcher by its framework name (e.g., 'toDependOn').

    Raises:
        UnknownMatcherError: If no matcher has that name
    """
    try:
        return MATCHERS[name]
    except KeyError:
        raise UnknownMatcherError(name) from None


__all__ = ["MATCHERS", "get_matcher"]
