"""PSR-4 namespaces — identifiers bound to one or more directories.

A namespace is an abstraction over the filesystem: ``Company\\Project``
mapped to ``src/`` and ``lib/`` is the union of both trees. Child
namespaces are the subdirectories of every backing path, merged by name.

INVARIANT: Namespaces are immutable. Resolving or iterating always
constructs new instances.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from pkgdoc.domain.errors import InvalidPath
from pkgdoc.domain.identifiers import (
    identifier_to_path,
    is_valid_identifier,
    join_identifier,
    normalize_identifier,
    parent_identifier,
    trim_identifier,
)
from pkgdoc.infrastructure.filesystem import iter_subdirectories, real_path

logger = logging.getLogger(__name__)


class Namespace:
    """A PSR-4 namespace.

    Args:
        identifier: The namespace identifier, e.g. ``Codehulk\\Name\\Space``.
            Leading and trailing separators are trimmed.
        *paths: One or more filesystem paths where the namespace is stored.
            Each is resolved to a canonical absolute path; duplicates are
            dropped keeping the first occurrence.

    Raises:
        InvalidIdentifier: If *identifier* is malformed.
        InvalidPath: If any path does not exist, or none is given.
    """

    __slots__ = ("_id", "_paths")

    def __init__(self, identifier: str, *paths: str | os.PathLike[str]) -> None:
        self._id = normalize_identifier(identifier)
        if not paths:
            raise InvalidPath("", reason=f"namespace '{self._id}' has no paths")

        resolved: list[Path] = []
        for path in paths:
            real = real_path(path)
            if real is None:
                raise InvalidPath(path)
            resolved.append(real)
        self._paths = tuple(dict.fromkeys(resolved))

    @property
    def id(self) -> str:
        return self._id

    @property
    def paths(self) -> tuple[Path, ...]:
        return self._paths

    @property
    def parent_id(self) -> str | None:
        """The identifier of this namespace's parent, or None at the root."""
        return parent_identifier(self._id)

    def find_namespace(self, identifier: str) -> Namespace | None:
        """Find a descendant namespace by fully-qualified identifier.

        The containment check is a plain string prefix: ``Test\\PackageX``
        is considered inside ``Test\\Package`` and checks the sibling
        directory ``{path}X``.

        Returns:
            A namespace over every backing path where the descendant
            exists, or None if it is illegal, outside this namespace, or
            absent from the filesystem.
        """
        if not is_valid_identifier(identifier):
            return None

        name = trim_identifier(identifier)
        if not name.startswith(self._id):
            return None

        relative = name[len(self._id) :]
        suffix = identifier_to_path(relative)
        found: list[Path] = []
        for path in self._paths:
            real = real_path(f"{path}{suffix}")
            if real is not None:
                found.append(real)

        if not found:
            return None
        return Namespace(name, *found)

    def iterate_namespaces(self) -> Iterator[Namespace]:
        """Yield the immediate child namespaces, sorted by name.

        Subdirectories sharing a name across backing paths merge into one
        child whose paths follow the order of this namespace's paths.
        Directories whose names are not legal identifiers are skipped.
        """
        groups: dict[str, list[Path]] = {}
        for directory in iter_subdirectories(self._paths):
            name = directory.name
            if not is_valid_identifier(name):
                logger.debug("Skipping directory with illegal name: %s", directory)
                continue
            groups.setdefault(name, []).append(directory)

        for name in sorted(groups):
            yield Namespace(join_identifier(self._id, name), *groups[name])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return self._id == other._id and self._paths == other._paths

    def __hash__(self) -> int:
        return hash((self._id, self._paths))

    def __repr__(self) -> str:
        paths = ", ".join(str(p) for p in self._paths)
        return f"Namespace({self._id!r}, {paths})"
