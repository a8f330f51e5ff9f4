# releaseratchet

Building blocks for a semantic release workflow driven by conventional commits:

- parse commit messages into structured commits (type, scope, breaking flag,
  body, footers), including Bitbucket Cloud squash merges;
- work out the bump level a set of commits calls for and apply it to a
  version, with pre-release numbering (`alpha.1`, `alpha.2`, `beta.1`, ...);
- read and rewrite the version in `Cargo.toml` (and `Cargo.lock`),
  `package.json`, `pyproject.toml`, or any file matched by a regular
  expression;
- run lifecycle hook commands with `RELEASE_VERSION` set.

## Installation

```
pip install releaseratchet
```

## Parsing commits

```python
from releaseratchet.parser import Forge, parse_commit, parse_commit_with_forge

commit = parse_commit("0" * 40, "feat(auth)!: add login\n\nBREAKING CHANGE: old API removed", "Alice")
commit.commit_type.name    # "feat"
commit.scope               # "auth"
commit.is_breaking()       # True
commit.footers[0].token    # "BREAKING CHANGE"

merged = parse_commit_with_forge(
    "0" * 40,
    "Merged in feature/auth (pull request #42)\n\nfeat(auth): add login endpoint",
    "Alice",
    Forge.BITBUCKET_CLOUD,
)
```

Messages that are not conventional commits give `None`. Commit types are
case-insensitive; `CommitType.default_bump()` gives `minor` for `feat`,
`patch` for `fix`, `perf` and `revert`, and `none` for everything else.

## Choosing the next version

```python
import semver
from releaseratchet.bump import BumpLevel, apply_bump, compute_prerelease_version, determine_bump

level = determine_bump(commits, lambda commit_type: commit_type.default_bump())
apply_bump(semver.Version.parse("1.2.3"), BumpLevel.MINOR)            # 1.3.0
compute_prerelease_version(semver.Version.parse("0.5.0"), None, BumpLevel.MAJOR, "alpha")
# 1.0.0-alpha.1
```

Any breaking commit makes `determine_bump` return `BumpLevel.MAJOR`. When a
previous pre-release is passed, its base version is kept and the counter
continues if the identifier matches, otherwise it restarts at 1. An invalid
pre-release identifier raises `releaseratchet.errors.InvalidVersionError`.

## Updating version files

```python
from pathlib import Path
import semver
from releaseratchet.bumper import EcosystemKind, EcosystemSpec, bump_all

specs = [
    EcosystemSpec(EcosystemKind.CARGO, Path("Cargo.toml")),
    EcosystemSpec(EcosystemKind.NODE, Path("package.json")),
    EcosystemSpec(EcosystemKind.GENERIC, Path("VERSION.txt"), pattern=r"version=(\S+)"),
]
changed = bump_all(Path("."), specs, semver.Version.parse("0.2.0"))
```

The handlers in `releaseratchet.ecosystems` (`CargoEcosystem`,
`NodeEcosystem`, `PythonEcosystem`, `GenericEcosystem`) can also be used
directly through `read_version`, `write_version` and `modified_files`.
Failures to read or write a file raise `releaseratchet.errors.VersionFileError`,
which names the file and the reason. A generic spec without a pattern raises
`releaseratchet.errors.ConfigError`.

## Hooks

```python
from releaseratchet.hooks import run_hooks

failures = run_hooks(["make dist"], Path("."), "0.2.0")
```

Each command runs through `sh -c` in the given directory; a failing hook is
reported as a warning on standard error and counted, never raised.

## Outcomes

`releaseratchet.errors` also defines `NothingToRelease` (code 2) and
`ValidationFailed` (code 3), subclasses of `ExitSignal`, for callers that
want to end a command with a specific exit status.

## What this package does not do

It is a library, not a finished release tool. It has no command-line
program, does not read a configuration file, does not walk git history,
create branches, commits or tags, and does not write a changelog. Callers
supply commit ids and messages themselves and decide what to do with the
versions and files it produces.