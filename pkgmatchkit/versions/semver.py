"""
npm-style version ranges.

Supported expressions:
- exact versions (e.g., "1.2.3", "=1.2.3", "v1.2.3")
- X-ranges and partial versions ("1.x", "1.2.*", "1", "*", "")
- caret ranges ^x.y.z (up to the next breaking version)
- tilde ranges ~x.y.z / ~>x.y.z (up to the next minor)
- primitive comparators <, <=, >, >=
- hyphen ranges "1.2.3 - 2.3.4"
- comparator sets split by spaces and unions split by "||"

Every comparator set desugars to a single interval, so two ranges
intersect exactly when some pair of their intervals overlaps.

Versions order by SemVer precedence: the major.minor.patch core is a
packaging Version, prerelease identifiers compare numerically when they
are numbers and lexically otherwise, and a release sorts above every
one of its prereleases ("1.0.0-alpha" < "1.0.0-next.1" < "1.0.0").
"""

import functools
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from packaging.version import Version

from pkgmatchkit.core.exceptions import InvalidRangeError

logger = logging.getLogger(__name__)

_PARTIAL_RE = re.compile(
    r"^v?(?P<major>\d+|[xX*])"
    r"(?:\.(?P<minor>\d+|[xX*])"
    r"(?:\.(?P<patch>\d+|[xX*])"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r")?)?$"
)
_COMPARATOR_RE = re.compile(r"^(?P<op><=|>=|~>|<|>|=|~|\^)?(?P<partial>.+)$")
_OPERATOR_SPACE_RE = re.compile(r"(<=|>=|~>|<|>|=|~|\^)\s+")
_HYPHEN_RE = re.compile(r"^(?P<low>\S+)\s+-\s+(?P<high>\S+)$")

Identifier = Union[int, str]


# ============================================================================
# Versions
# ============================================================================


@functools.total_ordering
@dataclass(frozen=True)
class SemVer:
    """
    A concrete version with SemVer precedence.

    Attributes:
        release: major.minor.patch core
        prerelease: Dot-separated prerelease identifiers, empty for a release
    """

    release: Version
    prerelease: Tuple[Identifier, ...] = ()

    def _key(self):
        if not self.prerelease:
            return (self.release, (1,))
        identifiers = tuple(
            (0, part) if isinstance(part, int) else (1, part)
            for part in self.prerelease
        )
        return (self.release, (0, identifiers))

    def __lt__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() < other._key()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        if not self.prerelease:
            return str(self.release)
        return f"{self.release}-{'.'.join(str(part) for part in self.prerelease)}"


def _split_prerelease(pre: str) -> Tuple[Identifier, ...]:
    return tuple(int(part) if part.isdigit() else part for part in pre.split("."))


def _make_version(
    major: int, minor: int = 0, patch: int = 0, pre: Optional[str] = None
) -> SemVer:
    release = Version(f"{major}.{minor}.{patch}")
    return SemVer(release, _split_prerelease(pre) if pre else ())


def _as_semver(version: Union[str, Version, SemVer]) -> SemVer:
    if isinstance(version, SemVer):
        return version
    if isinstance(version, Version):
        # only the release part of a packaging Version carries over
        return _make_version(*(tuple(version.release) + (0, 0))[:3])
    return parse_version(version)


@dataclass(frozen=True)
class _Partial:
    """A version with optional wildcard components (None = x)."""

    major: Optional[int]
    minor: Optional[int]
    patch: Optional[int]
    pre: Optional[str] = None

    @property
    def is_full(self) -> bool:
        return self.patch is not None

    def floor(self) -> SemVer:
        """Lowest version matched, filling wildcards with zero."""
        return _make_version(
            self.major or 0, self.minor or 0, self.patch or 0, self.pre
        )


def _parse_partial(text: str, expression: str) -> _Partial:
    match = _PARTIAL_RE.match(text)
    if not match:
        raise InvalidRangeError(expression, f"cannot parse {text!r}")

    parts = []
    for key in ("major", "minor", "patch"):
        value = match.group(key)
        parts.append(None if value is None or value in "xX*" else int(value))

    # A wildcard swallows every component after it: "1.x.3" means "1.x"
    major, minor, patch = parts
    if major is None:
        minor = patch = None
    elif minor is None:
        patch = None
    pre = match.group("pre") if patch is not None else None
    return _Partial(major, minor, patch, pre)


def parse_version(text: str) -> SemVer:
    """
    Parse a concrete version such as "1.2.3" or "v2.0.0-rc.1".

    Raises:
        InvalidRangeError: If text is not a complete version
    """
    partial = _parse_partial(str(text).strip().lstrip("="), str(text))
    if not partial.is_full:
        raise InvalidRangeError(str(text), "not a complete version")
    return partial.floor()


# ============================================================================
# Intervals
# ============================================================================


@dataclass(frozen=True)
class Bound:
    """One end of an interval."""

    version: SemVer
    inclusive: bool


_ZERO = Bound(_make_version(0), True)


def _tighter_lower(a: Optional[Bound], b: Optional[Bound]) -> Optional[Bound]:
    if a is None:
        return b
    if b is None:
        return a
    if a.version != b.version:
        return a if a.version > b.version else b
    return a if not a.inclusive else b


def _tighter_upper(a: Optional[Bound], b: Optional[Bound]) -> Optional[Bound]:
    if a is None:
        return b
    if b is None:
        return a
    if a.version != b.version:
        return a if a.version < b.version else b
    return a if not a.inclusive else b


@dataclass(frozen=True)
class Interval:
    """A contiguous set of versions; None means unbounded on that side."""

    lower: Optional[Bound] = None
    upper: Optional[Bound] = None

    def intersect(self, other: "Interval") -> "Interval":
        return Interval(
            _tighter_lower(self.lower, other.lower),
            _tighter_upper(self.upper, other.upper),
        )

    def is_empty(self) -> bool:
        if self.upper is None:
            return False
        lower = self.lower or _ZERO
        if lower.version != self.upper.version:
            return lower.version > self.upper.version
        return not (lower.inclusive and self.upper.inclusive)

    def contains(self, version: SemVer) -> bool:
        if self.lower is not None:
            if version < self.lower.version:
                return False
            if version == self.lower.version and not self.lower.inclusive:
                return False
        if self.upper is not None:
            if version > self.upper.version:
                return False
            if version == self.upper.version and not self.upper.inclusive:
                return False
        return True

    def __str__(self) -> str:
        parts = []
        if self.lower is not None:
            parts.append(f"{'>=' if self.lower.inclusive else '>'}{self.lower.version}")
        if self.upper is not None:
            parts.append(f"{'<=' if self.upper.inclusive else '<'}{self.upper.version}")
        return " ".join(parts) or "*"


NOTHING = Interval(Bound(_ZERO.version, False), Bound(_ZERO.version, False))
ANY = Interval()


def _at_least(version: SemVer, inclusive: bool = True) -> Interval:
    return Interval(lower=Bound(version, inclusive))


def _below(version: SemVer, inclusive: bool = False) -> Interval:
    return Interval(upper=Bound(version, inclusive))


def _between(low: SemVer, high: SemVer) -> Interval:
    return Interval(Bound(low, True), Bound(high, False))


def _comparator_interval(op: str, p: _Partial) -> Interval:
    """Desugar one comparator into an interval."""
    if op in ("", "="):
        if p.major is None:
            return ANY
        if p.minor is None:
            return _between(_make_version(p.major), _make_version(p.major + 1))
        if p.patch is None:
            return _between(
                _make_version(p.major, p.minor), _make_version(p.major, p.minor + 1)
            )
        exact = p.floor()
        return Interval(Bound(exact, True), Bound(exact, True))

    if op in ("~", "~>"):
        if p.major is None:
            return ANY
        if p.minor is None:
            return _between(_make_version(p.major), _make_version(p.major + 1))
        return _between(p.floor(), _make_version(p.major, p.minor + 1))

    if op == "^":
        if p.major is None:
            return ANY
        if p.minor is None:
            return _between(_make_version(p.major), _make_version(p.major + 1))
        if p.major > 0:
            return _between(p.floor(), _make_version(p.major + 1))
        if p.patch is None or p.minor > 0:
            return _between(p.floor(), _make_version(0, p.minor + 1))
        return _between(p.floor(), _make_version(0, 0, p.patch + 1))

    if op == ">":
        if p.major is None:
            return NOTHING
        if p.minor is None:
            return _at_least(_make_version(p.major + 1))
        if p.patch is None:
            return _at_least(_make_version(p.major, p.minor + 1))
        return _at_least(p.floor(), inclusive=False)

    if op == ">=":
        if p.major is None:
            return ANY
        return _at_least(p.floor())

    if op == "<":
        if p.major is None:
            return NOTHING
        return _below(p.floor())

    if op == "<=":
        if p.major is None:
            return ANY
        if p.minor is None:
            return _below(_make_version(p.major + 1))
        if p.patch is None:
            return _below(_make_version(p.major, p.minor + 1))
        return _below(p.floor(), inclusive=True)

    raise ValueError(f"unknown operator {op!r}")


def _parse_comparator_set(text: str, expression: str) -> Interval:
    if not text:
        return ANY

    hyphen = _HYPHEN_RE.match(text)
    if hyphen:
        low = _parse_partial(hyphen.group("low"), expression)
        high = _parse_partial(hyphen.group("high"), expression)
        return _comparator_interval(">=", low).intersect(
            _comparator_interval("<=", high)
        )

    interval = ANY
    for token in _OPERATOR_SPACE_RE.sub(r"\1", text).split():
        match = _COMPARATOR_RE.match(token)
        if not match:
            raise InvalidRangeError(expression, f"cannot parse {token!r}")
        partial = _parse_partial(match.group("partial"), expression)
        interval = interval.intersect(
            _comparator_interval(match.group("op") or "", partial)
        )
    return interval


# ============================================================================
# Ranges
# ============================================================================


@dataclass(frozen=True)
class VersionRange:
    """
    A parsed version range: the union of its intervals.

    Attributes:
        expression: Original range text
        intervals: Non-empty intervals, one per satisfiable comparator set
    """

    expression: str
    intervals: Tuple[Interval, ...]

    def is_empty(self) -> bool:
        return not self.intervals

    def contains(self, version: Union[str, Version, SemVer]) -> bool:
        version = _as_semver(version)
        return any(interval.contains(version) for interval in self.intervals)

    def intersects(self, other: "VersionRange") -> bool:
        return any(
            not a.intersect(b).is_empty()
            for a in self.intervals
            for b in other.intervals
        )

    def __str__(self) -> str:
        return self.expression


@functools.lru_cache(maxsize=256)
def parse_range(expression: str) -> VersionRange:
    """
    Parse an npm-style version range.

    Args:
        expression: Range text such as "^1.2.0", ">=1 <2 || 3.x"

    Returns:
        Parsed VersionRange

    Raises:
        InvalidRangeError: If the expression is not a valid range

    Example:
        >>> str(parse_range("^1.2.0").intervals[0])
        '>=1.2.0 <2.0.0'
    """
    if not isinstance(expression, str):
        raise InvalidRangeError(repr(expression), "not a string")

    intervals = []
    for part in expression.split("||"):
        interval = _parse_comparator_set(part.strip(), expression)
        if not interval.is_empty():
            intervals.append(interval)
    return VersionRange(expression, tuple(intervals))


def _as_range(value: Union[str, VersionRange]) -> VersionRange:
    return value if isinstance(value, VersionRange) else parse_range(value)


def intersects(
    range_a: Union[str, VersionRange], range_b: Union[str, VersionRange]
) -> bool:
    """
    Check whether some version satisfies both ranges.

    Example:
        >>> intersects("^1.0.0", "1.2.0")
        True
        >>> intersects("^1.0.0", "2.0.0")
        False
    """
    a, b = _as_range(range_a), _as_range(range_b)
    result = a.intersects(b)
    logger.debug(f"Ranges {a} and {b} intersect: {result}")
    return result


def satisfies(
    version: Union[str, Version, SemVer], range_: Union[str, VersionRange]
) -> bool:
    """
    Check whether a concrete version lies within a range.

    Example:
        >>> satisfies("1.4.2", "~1.4.0")
        True
    """
    return _as_range(range_).contains(version)


__all__ = [
    "SemVer",
    "Bound",
    "Interval",
    "VersionRange",
    "parse_version",
    "parse_range",
    "intersects",
    "satisfies",
]
