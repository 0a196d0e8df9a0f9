"""Project and config file discovery.

Both lookups walk up from the starting directory, the way git finds
``.git/``: first for ``pkgdoc.toml``, then for the manifest itself, so
running inside any subdirectory of a project finds the project root.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "pkgdoc.toml"
CONFIG_ENV_VAR = "PKGDOC_CONFIG"


def _walk_up(start: Path | None) -> Iterator[Path]:
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Locate pkgdoc.toml from *start* (default: cwd) upwards.

    The PKGDOC_CONFIG env var takes precedence; when it is set but does
    not point at a file, no config is used at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _walk_up(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_project_root(manifest: str, start: Path | None = None) -> Path | None:
    """Return the nearest directory at or above *start* containing *manifest*."""
    for directory in _walk_up(start):
        if (directory / manifest).is_file():
            return directory
    return None
