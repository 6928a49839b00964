"""Centralized package metadata and tolerant version helpers."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .logging_utils import get_logger
from .version import Version


PACKAGE_VERSION = "1.0.0"

_log = get_logger("metadata")


def display_version(value: str) -> str:
    """Return a version string prefixed with ``v`` if missing."""

    value = value.strip()
    return value if value.lower().startswith("v") else f"v{value}"


def normalize_version(value: str) -> str:
    """Strip a leading ``v``/``V`` and whitespace from a version string."""

    value = value.strip()
    return value[1:] if value[:1] in ("v", "V") else value


def try_parse_version(value: object, *, ignore_optional_tags: bool = False) -> Optional[Version]:
    """Return a :class:`Version` for ``value`` or None if it is not usable."""

    if isinstance(value, Version):
        if ignore_optional_tags and value.is_pre_release:
            return Version(value.raw, ignore_optional_tags=True)
        return value
    if not isinstance(value, str):
        _log.debug("Ignoring non-string version %r", value)
        return None
    try:
        return Version(value.strip(), ignore_optional_tags)
    except ValueError as exc:
        _log.debug("Ignoring unusable version %r: %s", value, exc)
        return None


def is_newer_version(latest: object, current: object, *, ignore_optional_tags: bool = False) -> bool:
    """Return True if ``latest`` orders strictly after ``current``."""

    latest_version = try_parse_version(latest, ignore_optional_tags=ignore_optional_tags)
    current_version = try_parse_version(current, ignore_optional_tags=ignore_optional_tags)
    if latest_version is None or current_version is None:
        return False
    return latest_version.newer_than(current_version)


def newest_version(candidates: Iterable[object], *, ignore_optional_tags: bool = False) -> Optional[Version]:
    """Return the newest usable candidate; the first one wins on ties."""

    newest: Optional[Version] = None
    for candidate in candidates:
        version = try_parse_version(candidate, ignore_optional_tags=ignore_optional_tags)
        if version is None:
            continue
        if newest is None or version.newer_than(newest):
            newest = version
    return newest


def sort_versions(
    candidates: Iterable[object],
    *,
    reverse: bool = False,
    ignore_optional_tags: bool = False,
) -> List[Version]:
    """Parse and sort candidates oldest first, dropping unusable ones."""

    versions = []
    for candidate in candidates:
        version = try_parse_version(candidate, ignore_optional_tags=ignore_optional_tags)
        if version is not None:
            versions.append(version)
    return sorted(versions, reverse=reverse)


__all__ = [
    "PACKAGE_VERSION",
    "display_version",
    "is_newer_version",
    "newest_version",
    "normalize_version",
    "sort_versions",
    "try_parse_version",
]
