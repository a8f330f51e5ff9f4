"""Running user-configured lifecycle hook commands."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

log = logging.getLogger(__name__)


def run_hooks(commands: Iterable[str], repo_root, version: str) -> int:
    """Run each hook through the shell in ``repo_root``; return how many failed.

    The release version is exposed to each hook as ``RELEASE_VERSION``.
    Failures are reported as warnings and never abort the run.
    """
    env = {**os.environ, "RELEASE_VERSION": str(version)}
    failures = 0
    for cmd in commands:
        log.info("running hook: %s", cmd)
        try:
            result = subprocess.run(["sh", "-c", cmd], cwd=Path(repo_root), env=env)
        except OSError as exc:
            print(f"warning: failed to run hook '{cmd}': {exc}", file=sys.stderr)
            failures += 1
            continue
        if result.returncode == 0:
            log.info("hook succeeded: %s", cmd)
        else:
            print(
                f"warning: hook '{cmd}' exited with exit status: {result.returncode}",
                file=sys.stderr,
            )
            failures += 1
    return failures