"""Reading and writing the version declared in project manifest files."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

import tomlkit
from semver import Version
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import AoT

from .errors import VersionFileError

log = logging.getLogger(__name__)

_VERSION_KEY = '"version"'


class Ecosystem(ABC):
    """A project file that carries the project's version."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    @abstractmethod
    def read_version(self, repo_root) -> Version:
        """Return the version declared in the file."""

    @abstractmethod
    def write_version(self, repo_root, version: Version) -> None:
        """Replace the declared version with ``version``."""

    def modified_files(self) -> list[Path]:
        """Paths, relative to the repository root, touched by ``write_version``."""
        return [self.path]

    def _error(self, reason: str) -> VersionFileError:
        return VersionFileError(self.path, reason)

    def _read(self, repo_root) -> str:
        try:
            with open(Path(repo_root) / self.path, encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise self._error(str(exc)) from exc

    def _write(self, repo_root, contents: str) -> None:
        try:
            with open(Path(repo_root) / self.path, "w", encoding="utf-8", newline="") as handle:
                handle.write(contents)
        except OSError as exc:
            raise self._error(str(exc)) from exc

    def _parse_semver(self, text: str) -> Version:
        try:
            return Version.parse(text)
        except (ValueError, TypeError) as exc:
            raise self._error(f"invalid semver '{text}': {exc}") from exc


class _TomlEcosystem(Ecosystem):
    """A TOML manifest whose version lives at ``<table>.version``."""

    table = ""

    def _parse_toml(self, contents: str) -> tomlkit.TOMLDocument:
        try:
            return tomlkit.parse(contents)
        except TOMLKitError as exc:
            raise self._error(f"invalid TOML: {exc}") from exc

    def _version_string(self, doc: tomlkit.TOMLDocument) -> str:
        section = doc.get(self.table)
        value = section.get("version") if isinstance(section, Mapping) else None
        if not isinstance(value, str):
            raise self._error(f"missing {self.table}.version")
        return str(value)

    def _set_version(self, doc: tomlkit.TOMLDocument, version: Version) -> None:
        if self.table not in doc:
            doc[self.table] = tomlkit.table()
        section = doc[self.table]
        if not isinstance(section, Mapping):
            raise self._error(f"'{self.table}' is not a table")
        section["version"] = str(version)

    def read_version(self, repo_root) -> Version:
        doc = self._parse_toml(self._read(repo_root))
        return self._parse_semver(self._version_string(doc))

    def write_version(self, repo_root, version: Version) -> None:
        doc = self._parse_toml(self._read(repo_root))
        self._set_version(doc, version)
        self._write(repo_root, tomlkit.dumps(doc))


class CargoEcosystem(_TomlEcosystem):
    """A ``Cargo.toml`` manifest, keeping a sibling ``Cargo.lock`` in step."""

    table = "package"

    @property
    def lockfile_path(self) -> Path:
        return self.path.parent / "Cargo.lock"

    def write_version(self, repo_root, version: Version) -> None:
        doc = self._parse_toml(self._read(repo_root))
        self._set_version(doc, version)
        self._write(repo_root, tomlkit.dumps(doc))

        name = doc[self.table].get("name")
        self._update_lockfile(Path(repo_root) / self.lockfile_path, str(name or ""), version)

    @staticmethod
    def _update_lockfile(lockfile: Path, package_name: str, version: Version) -> None:
        # Edit the lockfile directly so that no other files are touched.
        if not lockfile.exists():
            return
        try:
            with open(lockfile, encoding="utf-8", newline="") as handle:
                lock_doc = tomlkit.parse(handle.read())
        except (OSError, UnicodeDecodeError, TOMLKitError):
            return
        packages = lock_doc.get("package")
        if not isinstance(packages, AoT):
            return
        for package in packages:
            if package.get("name") == package_name:
                package["version"] = str(version)
        try:
            with open(lockfile, "w", encoding="utf-8", newline="") as handle:
                handle.write(tomlkit.dumps(lock_doc))
        except OSError as exc:
            log.warning("failed to update Cargo.lock: %s", exc)
        else:
            log.info("updated version in Cargo.lock")

    def modified_files(self) -> list[Path]:
        return [self.path, self.lockfile_path]


class PythonEcosystem(_TomlEcosystem):
    """A ``pyproject.toml`` with a static ``project.version``."""

    table = "project"


class NodeEcosystem(Ecosystem):
    """A ``package.json`` with a top-level ``version`` field."""

    def _old_version(self, contents: str) -> str:
        try:
            data = json.loads(contents)
        except ValueError as exc:
            raise self._error(f"invalid JSON: {exc}") from exc
        value = data.get("version") if isinstance(data, dict) else None
        if not isinstance(value, str):
            raise self._error('missing "version" field')
        return value

    def read_version(self, repo_root) -> Version:
        return self._parse_semver(self._old_version(self._read(repo_root)))

    def write_version(self, repo_root, version: Version) -> None:
        contents = self._read(repo_root)
        old_version = self._old_version(contents)
        span = _find_toplevel_version_value(contents, old_version)
        if span is None:
            raise self._error(
                f'could not locate top-level "version": "{old_version}" in file'
            )
        start, end = span
        self._write(repo_root, f"{contents[:start]}{version}{contents[end:]}")


def _find_toplevel_version_value(contents: str, old_version: str) -> tuple[int, int] | None:
    """Locate the value of the root object's ``"version"`` key as a (start, end) span.

    Brace depth is tracked so that ``version`` keys in nested objects are
    skipped; string contents are jumped over so braces inside them are ignored.
    """
    depth = 0
    pos = 0
    size = len(contents)
    while pos < size:
        char = contents[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == '"':
            if depth == 1 and contents.startswith(_VERSION_KEY, pos):
                colon = contents.find(":", pos + len(_VERSION_KEY))
                if colon < 0:
                    return None
                open_quote = contents.find('"', colon + 1)
                if open_quote < 0:
                    return None
                value_start = open_quote + 1
                value_end = contents.find('"', value_start)
                if value_end < 0:
                    return None
                if contents[value_start:value_end] == old_version:
                    return value_start, value_end
            pos += 1
            while pos < size and contents[pos] != '"':
                if contents[pos] == "\\":
                    pos += 1
                pos += 1
        pos += 1
    return None


class GenericEcosystem(Ecosystem):
    """Any text file whose version is the first capture group of a regex."""

    def __init__(self, path, pattern: str) -> None:
        super().__init__(path)
        try:
            self.regex = re.compile(pattern)
        except re.error as exc:
            raise self._error(f"invalid regex pattern: {exc}") from exc

    def __repr__(self) -> str:
        return f"GenericEcosystem({str(self.path)!r}, {self.regex.pattern!r})"

    def _match(self, contents: str) -> re.Match:
        match = self.regex.search(contents)
        if match is None:
            raise self._error(f"pattern '{self.regex.pattern}' did not match")
        if self.regex.groups < 1 or match.group(1) is None:
            raise self._error("pattern must have a capture group for the version")
        return match

    def read_version(self, repo_root) -> Version:
        return self._parse_semver(self._match(self._read(repo_root)).group(1))

    def write_version(self, repo_root, version: Version) -> None:
        contents = self._read(repo_root)
        start, end = self._match(contents).span(1)
        self._write(repo_root, f"{contents[:start]}{version}{contents[end:]}")