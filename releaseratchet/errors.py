"""Exception hierarchy for release operations."""

from __future__ import annotations


class RatchetError(Exception):
    """Base class for every failure raised by the release tooling."""

    _prefix = ""

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self._prefix}{message}" if self._prefix else message


class ConfigError(RatchetError):
    """The configuration is missing, malformed or inconsistent."""

    _prefix = "config error: "


class ChangelogError(RatchetError):
    """The changelog could not be read, parsed or written."""

    _prefix = "changelog error: "


class InvalidVersionError(RatchetError, ValueError):
    """A string is not a valid semantic version or pre-release."""

    _prefix = "invalid semver: "


class VersionFileError(RatchetError):
    """A version could not be read from or written to a project file."""

    def __init__(self, path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"version file error for {self.path}: {reason}")


class TagAlreadyExistsError(RatchetError):
    """A release tag with the requested name is already present."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"tag '{tag}' already exists")


class ExitSignal(Exception):
    """A non-error outcome that ends a command with a specific exit code."""

    code = 1
    message = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class NothingToRelease(ExitSignal):
    """No releasable commits were found."""

    code = 2
    message = "nothing to release"


class ValidationFailed(ExitSignal):
    """One or more commit messages failed validation."""

    code = 3
    message = "validation failed"