"""Bump levels and semantic version arithmetic."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from enum import IntEnum

from semver import Version

from .errors import InvalidVersionError

_PRERELEASE_RE = re.compile(r"^[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*$")


class BumpLevel(IntEnum):
    """How far a version moves; ordered from no change to a major bump."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()


def determine_bump(commits: Iterable, bump_for_type: Callable) -> BumpLevel:
    """Return the highest bump required by the commits.

    Any breaking commit forces a major bump; otherwise each commit type is
    mapped through ``bump_for_type``.
    """
    level = BumpLevel.NONE
    for commit in commits:
        if commit.is_breaking():
            return BumpLevel.MAJOR
        level = max(level, BumpLevel(bump_for_type(commit.commit_type)))
    return level


def apply_bump(version: Version, bump: BumpLevel) -> Version:
    """Return ``version`` advanced by ``bump``, dropping lower components."""
    if bump is BumpLevel.MAJOR:
        return Version(version.major + 1, 0, 0)
    if bump is BumpLevel.MINOR:
        return Version(version.major, version.minor + 1, 0)
    if bump is BumpLevel.PATCH:
        return Version(version.major, version.minor, version.patch + 1)
    return version


def base_version(version: Version) -> Version:
    """Strip pre-release and build metadata, keeping major.minor.patch."""
    return Version(version.major, version.minor, version.patch)


def _prerelease_parts(pre: str) -> tuple[str, int] | None:
    ident, dot, number = pre.rpartition(".")
    if not dot or not (number.isascii() and number.isdigit()):
        return None
    return ident, int(number)


def compute_prerelease_version(
    last_stable: Version,
    last_prerelease: Version | None,
    bump: BumpLevel,
    prerelease_id: str,
) -> Version:
    """Compute the next ``<base>-<prerelease_id>.<n>`` version.

    The base comes from the last pre-release if there is one, otherwise from
    bumping the last stable release. The counter continues when the
    identifier matches the previous pre-release and restarts at 1 otherwise.
    """
    if last_prerelease is not None:
        base = base_version(last_prerelease)
        parts = _prerelease_parts(last_prerelease.prerelease or "")
        if parts is not None and parts[0] == prerelease_id:
            number = parts[1] + 1
        else:
            number = 1
    else:
        base = apply_bump(last_stable, bump)
        number = 1

    pre = f"{prerelease_id}.{number}"
    if not _PRERELEASE_RE.match(pre):
        raise InvalidVersionError(f"invalid pre-release identifier '{prerelease_id}'")
    return Version(base.major, base.minor, base.patch, prerelease=pre)