"""Filesystem lookups used by namespace resolution and package discovery.

INVARIANT: Files are truth. Nothing here caches; every call re-reads the
directory tree so a scan always reflects the filesystem at pull time.

Hidden entries (names starting with ``.``) and version-control
directories are never reported as subdirectories and are never searched
for documentation files.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path


def real_path(path: str | os.PathLike[str]) -> Path | None:
    """Resolve *path* to a canonical absolute path.

    Relative paths resolve against the current working directory and
    symlinks are followed. Returns None if nothing exists at *path*.
    """
    candidate = Path(path)
    if not candidate.exists():
        return None
    return candidate.resolve()


# VCS metadata directories whose names do not start with a dot.
_VCS_DIRECTORIES = frozenset({"CVS", "_svn", "_darcs"})


def _is_hidden(entry: Path) -> bool:
    return entry.name.startswith(".") or entry.name in _VCS_DIRECTORIES


def iter_subdirectories(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield the immediate subdirectories of each path in *paths*.

    Paths are visited in the order given. Entries within one path are
    yielded in name order.
    """
    for path in paths:
        if not path.is_dir():
            continue
        for entry in sorted(path.iterdir()):
            if _is_hidden(entry) or not entry.is_dir():
                continue
            yield entry


def find_named_file(directory: Path, filename: str) -> Path | None:
    """Return the resolved path of *filename* inside *directory*, if present.

    The match is exact and case-sensitive, even on case-insensitive
    filesystems.
    """
    if not directory.is_dir():
        return None
    for entry in directory.iterdir():
        if entry.name == filename and entry.is_file():
            return entry.resolve()
    return None


def iter_nested_files(paths: Iterable[Path], filename: str) -> Iterator[Path]:
    """Yield files named *filename* exactly one directory below *paths*.

    ``{path}/{child}/{filename}`` matches; ``{path}/{filename}`` and
    anything deeper do not.
    """
    for child in iter_subdirectories(paths):
        found = find_named_file(child, filename)
        if found is not None:
            yield found
