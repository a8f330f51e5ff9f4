"""Building ecosystems from configuration and bumping them together."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from semver import Version

from .ecosystems import (
    CargoEcosystem,
    Ecosystem,
    GenericEcosystem,
    NodeEcosystem,
    PythonEcosystem,
)
from .errors import ConfigError


class EcosystemKind(str, Enum):
    """The kinds of version file that can be configured."""

    CARGO = "cargo"
    NODE = "node"
    PYTHON = "python"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EcosystemSpec:
    """One configured version file: its kind, path and, for generic files, a regex."""

    kind: EcosystemKind
    path: Path
    pattern: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", EcosystemKind(self.kind))
        object.__setattr__(self, "path", Path(self.path))


_SIMPLE_KINDS = {
    EcosystemKind.CARGO: CargoEcosystem,
    EcosystemKind.NODE: NodeEcosystem,
    EcosystemKind.PYTHON: PythonEcosystem,
}


def create_ecosystem(spec: EcosystemSpec) -> Ecosystem:
    """Build the ecosystem handler described by ``spec``."""
    if spec.kind is EcosystemKind.GENERIC:
        if spec.pattern is None:
            raise ConfigError(f"generic ecosystem '{spec.path}' requires a pattern")
        return GenericEcosystem(spec.path, spec.pattern)
    return _SIMPLE_KINDS[spec.kind](spec.path)


def bump_all(repo_root, specs, version: Version) -> list[Path]:
    """Write ``version`` into every configured file; return the paths modified."""
    modified: list[Path] = []
    for spec in specs:
        ecosystem = create_ecosystem(spec)
        ecosystem.write_version(repo_root, version)
        modified.extend(ecosystem.modified_files())
    return modified