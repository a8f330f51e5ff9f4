"""Conventional commit data types."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bump import BumpLevel

_DEFAULT_BUMPS = {
    "feat": BumpLevel.MINOR,
    "fix": BumpLevel.PATCH,
    "perf": BumpLevel.PATCH,
    "revert": BumpLevel.PATCH,
}

_DEFAULT_HEADINGS = {
    "feat": "Features",
    "fix": "Bug Fixes",
    "perf": "Performance",
    "revert": "Reverts",
}

STANDARD_TYPES = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
)

_BREAKING_TOKENS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})


@dataclass(frozen=True)
class CommitType:
    """A commit type such as ``feat`` or ``fix``; names are case-insensitive."""

    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.lower())

    @classmethod
    def parse(cls, text: str) -> CommitType:
        """Build a commit type from its textual form."""
        return cls(text)

    @property
    def is_custom(self) -> bool:
        """True for types outside the conventional standard set."""
        return self.name not in STANDARD_TYPES

    def default_bump(self) -> BumpLevel:
        """The bump level this type implies without configuration."""
        return _DEFAULT_BUMPS.get(self.name, BumpLevel.NONE)

    def default_changelog_heading(self) -> str | None:
        """The changelog heading for this type, or None if it is not listed."""
        return _DEFAULT_HEADINGS.get(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass
class CommitFooter:
    """A trailer line such as ``Refs: #12`` or ``BREAKING CHANGE: ...``."""

    token: str
    value: str


@dataclass
class ConventionalCommit:
    """A commit whose message follows the conventional commit format."""

    oid: str
    commit_type: CommitType
    scope: str | None
    breaking: bool
    description: str
    body: str | None = None
    footers: list[CommitFooter] = field(default_factory=list)
    raw_message: str = ""
    author: str = ""

    def is_breaking(self) -> bool:
        """True if marked with ``!`` or carrying a breaking-change footer."""
        return self.breaking or any(
            footer.token.upper() in _BREAKING_TOKENS for footer in self.footers
        )

    def short_oid(self) -> str:
        """The abbreviated commit id."""
        return short_oid(self.oid)


def short_oid(oid) -> str:
    """Abbreviate a commit id to its first seven hex digits."""
    return str(oid)[:7]