"""Parsing and ordering of human-readable version identifiers."""

from __future__ import annotations

from .metadata import PACKAGE_VERSION, is_newer_version, newest_version, sort_versions
from .updates import UpdateCheckResult, UpdateStatus, evaluate_update
from .version import (
    InvalidVersionStringError,
    Version,
    VersionComparison,
    VersionNumberFormatError,
    compare,
    is_valid_version_string,
    parse,
)

__version__ = PACKAGE_VERSION

__all__ = [
    "InvalidVersionStringError",
    "PACKAGE_VERSION",
    "UpdateCheckResult",
    "UpdateStatus",
    "Version",
    "VersionComparison",
    "VersionNumberFormatError",
    "__version__",
    "compare",
    "evaluate_update",
    "is_newer_version",
    "is_valid_version_string",
    "newest_version",
    "parse",
    "sort_versions",
]
