"""Packages — namespaces promoted to a unit of functionality.

A package is a collection of related classes that forms a single unit of
functionality, the way a class is a collection of interdependent
functions. Packages nest at most one tier: a sub-package is never a
parent.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from pkgdoc.domain.types import NamespaceLike


@dataclass(frozen=True, eq=False)
class Package:
    """A package backed by *namespace*, optionally nested under *parent*.

    *parent* is a plain back-reference; the parent does not track its
    children. Equality is identity so sub-packages can be matched to the
    exact parent instance that produced them.
    """

    namespace: NamespaceLike
    parent: Package | None = None

    @property
    def id(self) -> str:
        return self.namespace.id

    @property
    def paths(self) -> tuple[Path, ...]:
        return self.namespace.paths

    @property
    def parent_id(self) -> str | None:
        return self.namespace.parent_id

    @property
    def is_sub_package(self) -> bool:
        """Whether this package is nested under another package."""
        return self.parent is not None

    def find_namespace(self, identifier: str) -> NamespaceLike | None:
        return self.namespace.find_namespace(identifier)

    def iterate_namespaces(self) -> Iterator[NamespaceLike]:
        return self.namespace.iterate_namespaces()

    def to_dict(self) -> dict[str, object]:
        """Serialize for ServiceResult payloads."""
        return {
            "id": self.id,
            "paths": [str(p) for p in self.paths],
            "parent": self.parent.id if self.parent is not None else None,
            "sub_package": self.is_sub_package,
        }
