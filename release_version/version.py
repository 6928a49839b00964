"""Parsing, normalisation and ordering of human-readable version identifiers.

A :class:`Version` is built once from a string such as ``"1.4.2"``,
``"v2.0.0-beta3"`` or ``"3.1-rc2-snapshot"`` and is immutable afterwards.
Comparison works on the normalised ``components`` vector only, so
``Version("1.0")`` and ``Version("1.0.0")`` are equal and hash identically.

Pre-release tags (``alpha``, ``beta``, ``pre``, ``rc``, ``snapshot``) are folded
into one synthetic trailing component and a "borrow" from the numeric part, which
makes every pre-release sort before the final release sharing its numeric prefix.
"""

from __future__ import annotations

import enum
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


VERSION_STRING_FORMAT = r"[vV]?\d+(\.\d+)*(-[^-\s]+)*"
RELEASE_STAGE_KEYWORDS: Tuple[str, ...] = ("alpha", "beta", "pre", "rc", "snapshot")
MAX_COMPONENT = 2**31 - 1

_VERSION_PATTERN = re.compile(VERSION_STRING_FORMAT, re.ASCII)
_PRE_RELEASE_TAG_PATTERN = re.compile(r"\w+\d", re.ASCII)

PRE_RELEASE_TAG_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        keyword: (len(RELEASE_STAGE_KEYWORDS) + 1 - index) * 10
        for index, keyword in enumerate(RELEASE_STAGE_KEYWORDS)
    }
)


class VersionComparison(enum.IntEnum):
    """Result of comparing a version against another, from the left side's view."""

    OLDER = -1
    SAME = 0
    NEWER = 1


class InvalidVersionStringError(ValueError):
    """Raised when a string does not have the shape of a version identifier."""

    def __init__(self, version: object) -> None:
        self.version = version
        self.pattern = VERSION_STRING_FORMAT
        super().__init__(
            f"Invalid version string {version!r}; expected format: {VERSION_STRING_FORMAT}"
        )


class VersionNumberFormatError(ValueError):
    """Raised when a numeric group of a version cannot be used as a component."""

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(
            f"Version component {group!r} is not an integer between 0 and {MAX_COMPONENT}"
        )


def is_valid_version_string(value: object) -> bool:
    """Return True if ``value`` matches :data:`VERSION_STRING_FORMAT` as a whole."""

    if not isinstance(value, str):
        return False
    return _VERSION_PATTERN.fullmatch(value) is not None


def _strip_trailing_zero_groups(numeric: str) -> str:
    # The leading group is never preceded by a dot, so it always survives.
    while numeric.endswith(".0"):
        numeric = numeric[:-2]
    return numeric


def _parse_group(group: str) -> int:
    if not group.isascii() or not group.isdigit():
        raise VersionNumberFormatError(group)
    value = int(group)
    if value > MAX_COMPONENT:
        raise VersionNumberFormatError(group)
    return value


def _collect_release_stage_tags(tags: Tuple[str, ...]) -> List[Tuple[str, str]]:
    """Pair every tag with each release-stage keyword it contains.

    Results are grouped by keyword in :data:`RELEASE_STAGE_KEYWORDS` order, not by
    the order the tags appear in. Matching is a case-insensitive substring test,
    so ``"prerelease"`` counts as ``"pre"``.
    """

    matches: List[Tuple[str, str]] = []
    for keyword in RELEASE_STAGE_KEYWORDS:
        for tag in tags:
            if keyword in tag.lower():
                matches.append((keyword, tag))
    return matches


def _pre_release_component(matches: List[Tuple[str, str]]) -> int:
    last = 0
    for keyword, tag in matches:
        if last == 0:
            last = MAX_COMPONENT
        sub_version = 0
        # Only a single trailing digit counts: "beta10" has sub-version 0.
        if _PRE_RELEASE_TAG_PATTERN.fullmatch(tag):
            sub_version = int(tag[-1])
        last = (last - PRE_RELEASE_TAG_WEIGHTS[keyword]) + sub_version
    return last


def _borrow(numbers: List[int]) -> None:
    for index in range(len(numbers) - 1, -1, -1):
        if numbers[index] > 0 or index == 0:
            numbers[index] -= 1
            break


def _hash_key(components: Tuple[int, ...]) -> Tuple[int, ...]:
    end = len(components)
    while end > 1 and components[end - 1] == 0:
        end -= 1
    return components[:end]


class Version:
    """Immutable, comparable version identifier.

    ``Version("v1.2.0-rc1")`` keeps ``"1.2.0-rc1"`` as its display string and
    compares through its normalised component vector. Set
    ``ignore_optional_tags`` to treat dash-separated tags as display-only.
    """

    __slots__ = ("_raw", "_components", "_optional_tags", "_is_pre_release", "_hash")

    def __init__(self, version: str, ignore_optional_tags: bool = False) -> None:
        if not isinstance(version, str) or not version or not is_valid_version_string(version):
            raise InvalidVersionStringError(version)
        if version[0] in "vV":
            version = version[1:]

        numeric, _, options = version.partition("-")
        optional_tags = tuple(options.split("-")) if options else ()
        numbers = [_parse_group(group) for group in _strip_trailing_zero_groups(numeric).split(".")]

        matches = [] if ignore_optional_tags else _collect_release_stage_tags(optional_tags)
        components: Tuple[int, ...]
        if matches:
            last = _pre_release_component(matches)
            if last > 0:
                _borrow(numbers)
            components = tuple(numbers) + (last,)
        else:
            components = tuple(numbers)

        object.__setattr__(self, "_raw", version)
        object.__setattr__(self, "_components", components)
        object.__setattr__(self, "_optional_tags", optional_tags)
        object.__setattr__(self, "_is_pre_release", bool(matches))
        object.__setattr__(self, "_hash", hash(_hash_key(components)))

    @classmethod
    def parse(cls, version: str, ignore_optional_tags: bool = False) -> "Version":
        return cls(version, ignore_optional_tags)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def components(self) -> Tuple[int, ...]:
        return self._components

    @property
    def optional_tags(self) -> Tuple[str, ...]:
        return self._optional_tags

    @property
    def is_pre_release(self) -> bool:
        return self._is_pre_release

    def to_display_string(self) -> str:
        """Return the original string without its leading ``v``/``V``."""

        return self._raw

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare(self, other: "Version") -> VersionComparison:
        """Compare component-wise; extra trailing components only count when positive."""

        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        mine = self._components
        theirs = other._components
        common = min(len(mine), len(theirs))
        for index in range(common):
            if theirs[index] > mine[index]:
                return VersionComparison.OLDER
            if theirs[index] < mine[index]:
                return VersionComparison.NEWER
        if len(mine) == len(theirs):
            return VersionComparison.SAME

        other_longer = len(theirs) > len(mine)
        longer = theirs if other_longer else mine
        if any(component > 0 for component in longer[common:]):
            return VersionComparison.OLDER if other_longer else VersionComparison.NEWER
        return VersionComparison.SAME

    def newer_than(self, other: "Version") -> bool:
        return self.compare(other) == VersionComparison.NEWER

    def newer_or_equal_than(self, other: "Version") -> bool:
        return self.compare(other) >= VersionComparison.SAME

    def older_than(self, other: "Version") -> bool:
        return self.compare(other) == VersionComparison.OLDER

    def older_or_equal_than(self, other: "Version") -> bool:
        return self.compare(other) <= VersionComparison.SAME

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == VersionComparison.SAME

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.older_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.older_or_equal_than(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.newer_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.newer_or_equal_than(other)

    def __hash__(self) -> int:
        return self._hash

    # ------------------------------------------------------------------
    # Immutability and display
    # ------------------------------------------------------------------
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_restore, (self._raw, self._components, self._optional_tags, self._is_pre_release))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Version({self._raw!r})"


def _restore(
    raw: str,
    components: Tuple[int, ...],
    optional_tags: Tuple[str, ...],
    is_pre_release: bool,
) -> Version:
    version = Version.__new__(Version)
    object.__setattr__(version, "_raw", raw)
    object.__setattr__(version, "_components", components)
    object.__setattr__(version, "_optional_tags", optional_tags)
    object.__setattr__(version, "_is_pre_release", is_pre_release)
    object.__setattr__(version, "_hash", hash(_hash_key(components)))
    return version


def parse(version: str, ignore_optional_tags: bool = False) -> Version:
    """Build a :class:`Version`, raising on strings that are not version identifiers."""

    return Version(version, ignore_optional_tags)


def compare(a: Version, b: Optional[Version]) -> VersionComparison:
    """Return how ``a`` relates to ``b``; ``None`` on either side raises ``TypeError``."""

    if not isinstance(a, Version):
        raise TypeError(f"Cannot compare {type(a).__name__} with Version")
    return a.compare(b)  # type: ignore[arg-type]


__all__ = [
    "MAX_COMPONENT",
    "PRE_RELEASE_TAG_WEIGHTS",
    "RELEASE_STAGE_KEYWORDS",
    "VERSION_STRING_FORMAT",
    "InvalidVersionStringError",
    "Version",
    "VersionComparison",
    "VersionNumberFormatError",
    "compare",
    "is_valid_version_string",
    "parse",
]
