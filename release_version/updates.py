"""Decide whether a remote release tag is an update for the running version."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from .logging_utils import get_logger
from .metadata import try_parse_version
from .version import Version, VersionComparison


class UpdateStatus(enum.Enum):
    UPDATE_AVAILABLE = "update_available"
    UP_TO_DATE = "up_to_date"
    AHEAD = "ahead"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class UpdateCheckResult:
    """Outcome of comparing the running version with a release tag."""

    status: UpdateStatus
    current: Optional[Version] = None
    remote: Optional[Version] = None

    @property
    def update_available(self) -> bool:
        return self.status is UpdateStatus.UPDATE_AVAILABLE


_log = get_logger("updates")


def evaluate_update(
    current: Union[str, Version],
    remote_tag: Optional[str],
    *,
    ignore_optional_tags: bool = False,
) -> UpdateCheckResult:
    """Classify ``remote_tag`` (e.g. ``"v1.3.0"``) against the ``current`` version."""

    current_version = try_parse_version(current, ignore_optional_tags=ignore_optional_tags)
    if current_version is None:
        _log.warning("Current version %r is not a usable version identifier", current)
        return UpdateCheckResult(UpdateStatus.UNKNOWN)

    tag = str(remote_tag or "").strip()
    if not tag:
        _log.debug("No release tag to compare against %s", current_version)
        return UpdateCheckResult(UpdateStatus.UNKNOWN, current=current_version)

    remote_version = try_parse_version(tag, ignore_optional_tags=ignore_optional_tags)
    if remote_version is None:
        _log.debug("Release tag %r is not a usable version identifier", tag)
        return UpdateCheckResult(UpdateStatus.UNKNOWN, current=current_version)

    comparison = remote_version.compare(current_version)
    if comparison is VersionComparison.NEWER:
        _log.info("New version %s available (current %s)", remote_version, current_version)
        status = UpdateStatus.UPDATE_AVAILABLE
    elif comparison is VersionComparison.OLDER:
        _log.debug(
            "Current version %s is ahead of release %s",
            current_version,
            remote_version,
        )
        status = UpdateStatus.AHEAD
    else:
        _log.debug("Current version %s is up to date", current_version)
        status = UpdateStatus.UP_TO_DATE
    return UpdateCheckResult(status, current=current_version, remote=remote_version)


__all__ = ["UpdateCheckResult", "UpdateStatus", "evaluate_update"]
