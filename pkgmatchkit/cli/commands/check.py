"""
Check command implementation.

Evaluates dependency and binary-link assertions against one package and
prints a PASS/FAIL line per assertion.
"""

import logging
from typing import List, Optional, Tuple

from pkgmatchkit.config.settings import load_settings
from pkgmatchkit.matchers.binary_links import to_binary_link
from pkgmatchkit.matchers.dependency import (
    to_depend_on,
    to_dev_depend_on,
    to_optionally_depend_on,
    to_peer_depend_on,
)
from pkgmatchkit.matchers.verdict import Verdict
from pkgmatchkit.packages.descriptor import resolve_package

logger = logging.getLogger(__name__)

_DEPENDENCY_OPTIONS = (
    ("depends_on", to_depend_on),
    ("dev_depends_on", to_dev_depend_on),
    ("peer_depends_on", to_peer_depend_on),
    ("optionally_depends_on", to_optionally_depend_on),
)


def parse_dependency_spec(spec: str) -> Tuple[str, Optional[str]]:
    """
    Split a NAME[@RANGE] argument.

    Scoped names keep their leading '@'.

    Example:
        >>> parse_dependency_spec("@scope/pkg@^1.0.0")
        ('@scope/pkg', '^1.0.0')
        >>> parse_dependency_spec("lodash")
        ('lodash', None)
    """
    index = spec.rfind("@")
    if index <= 0:
        return spec, None
    return spec[:index], spec[index + 1 :] or None


def run(args) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every assertion passes)
    """
    settings = load_settings(config_file=args.config)
    package = resolve_package(args.package_dir, settings)
    logger.debug(f"Checking {package}")

    verdicts: List[Verdict] = []
    for option, matcher in _DEPENDENCY_OPTIONS:
        for spec in getattr(args, option) or []:
            name, range_ = parse_dependency_spec(spec)
            verdicts.append(matcher(package.manifest, name, range_))

    if args.links is not None:
        verdicts.append(
            to_binary_link(package, args.links, platform=args.platform, settings=settings)
        )

    if not verdicts:
        logger.error("No assertions given (use --depends-on, --links, ...)")
        return 1

    for verdict in verdicts:
        print(verdict)

    failed = sum(1 for verdict in verdicts if not verdict.passed)
    if failed:
        logger.info(f"{failed} of {len(verdicts)} assertion(s) failed")
        return 1
    logger.info(f"All {len(verdicts)} assertion(s) passed")
    return 0
