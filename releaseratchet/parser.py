"""Parsing commit messages in the conventional commit format."""

from __future__ import annotations

import re
from dataclasses import replace
from enum import Enum

from .commit import CommitFooter, CommitType, ConventionalCommit

_HEADER_RE = re.compile(
    r"^(?P<type>[a-zA-Z]+)(?:\((?P<scope>[^\)]+)\))?(?P<breaking>!)?:\s+(?P<desc>.+)$"
)

# Footers use either ": " or " #" as the separator between token and value.
_FOOTER_RE = re.compile(
    r"^(?P<token>[A-Za-z][A-Za-z0-9\-]*|BREAKING CHANGE)\s*:\s+(?P<value>.+)$"
    r"|^(?P<token2>[A-Za-z][A-Za-z0-9\-]*)\s+(?P<value2>#.+)$"
)

_BB_CLOUD_MERGE_RE = re.compile(r"^Merged in .+ \(pull request #\d+\)$")


class Forge(str, Enum):
    """A git hosting service whose merge commits need special handling."""

    BITBUCKET_CLOUD = "bitbucket-cloud"

    def __str__(self) -> str:
        return self.value


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a final empty line and trailing carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def parse_commit(oid, message: str, author: str) -> ConventionalCommit | None:
    """Parse ``message`` as a conventional commit, or return None if it is not one."""
    lines = _split_lines(message)
    if not lines:
        return None

    match = _HEADER_RE.match(lines[0].strip())
    if match is None:
        return None

    body, footers = _parse_body_and_footers(lines[1:])
    return ConventionalCommit(
        oid=oid,
        commit_type=CommitType.parse(match["type"]),
        scope=match["scope"],
        breaking=match["breaking"] is not None,
        description=match["desc"].strip(),
        body=body,
        footers=footers,
        raw_message=message,
        author=author,
    )


def parse_commit_with_forge(
    oid, message: str, author: str, forge: Forge | None
) -> ConventionalCommit | None:
    """Parse a commit, falling back to forge-specific merge-commit layouts.

    For Bitbucket Cloud the conventional header is the first non-blank line
    after ``Merged in <branch> (pull request #N)``.
    """
    commit = parse_commit(oid, message, author)
    if commit is not None:
        return commit
    if forge is Forge.BITBUCKET_CLOUD:
        return _parse_bitbucket_cloud_commit(oid, message, author)
    return None


def _parse_bitbucket_cloud_commit(
    oid, message: str, author: str
) -> ConventionalCommit | None:
    lines = _split_lines(message)
    if not lines or not _BB_CLOUD_MERGE_RE.match(lines[0].strip()):
        return None

    rest = lines[1:]
    start = next((n for n, line in enumerate(rest) if line.strip()), None)
    if start is None:
        return None

    commit = parse_commit(oid, "\n".join(rest[start:]), author)
    if commit is None:
        return None
    return replace(commit, raw_message=message)


def _parse_body_and_footers(lines: list[str]) -> tuple[str | None, list[CommitFooter]]:
    count = len(lines)
    start = next((n for n, line in enumerate(lines) if line.strip()), count)
    if start >= count:
        return None, []

    # Walk backwards from the end to find the footer block, which must be
    # separated from the body by a blank line.
    footer_start = count
    for i in range(count - 1, start - 1, -1):
        line = lines[i].strip()
        if not line:
            break
        if _FOOTER_RE.match(line) or footer_start < count:
            # A footer line, or a continuation of a multi-line footer value.
            footer_start = i
        else:
            footer_start = count
            break

    has_blank_before_footers = (
        footer_start > start and footer_start > 0 and not lines[footer_start - 1].strip()
    )

    if footer_start < count and has_blank_before_footers:
        body_lines, footer_lines = lines[start : footer_start - 1], lines[footer_start:]
    elif footer_start < count and footer_start == start:
        body_lines, footer_lines = [], lines[footer_start:]
    else:
        body_lines, footer_lines = lines[start:], []

    body = "\n".join(body_lines).strip() or None

    footers: list[CommitFooter] = []
    current: CommitFooter | None = None
    for raw in footer_lines:
        line = raw.strip()
        match = _FOOTER_RE.match(line)
        if match is not None:
            if current is not None:
                footers.append(current)
            if match["token"] is not None:
                current = CommitFooter(match["token"], match["value"])
            else:
                current = CommitFooter(match["token2"], match["value2"])
        elif current is not None:
            current.value += "\n" + line
    if current is not None:
        footers.append(current)

    return body, footers