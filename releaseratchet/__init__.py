"""Conventional commit parsing, semantic version bumps, version-file updates and hooks."""

__version__ = "0.4.0"

__all__ = ["bump", "bumper", "commit", "ecosystems", "errors", "hooks", "parser"]