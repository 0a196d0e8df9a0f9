"""Capability protocols shared by namespaces and packages.

Packages are built by composition over a namespace rather than by
inheritance; both satisfy :class:`NamespaceLike`.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class NamespaceLike(Protocol):
    """An identifier bound to one or more directories."""

    @property
    def id(self) -> str: ...

    @property
    def paths(self) -> tuple[Path, ...]: ...

    @property
    def parent_id(self) -> str | None: ...

    def find_namespace(self, identifier: str) -> NamespaceLike | None: ...

    def iterate_namespaces(self) -> Iterator[NamespaceLike]: ...


@runtime_checkable
class PackageLike(NamespaceLike, Protocol):
    """A namespace promoted to a unit of functionality."""

    @property
    def parent(self) -> PackageLike | None: ...

    @property
    def is_sub_package(self) -> bool: ...
