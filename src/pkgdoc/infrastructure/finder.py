"""Package discovery across namespaces and package roots.

For each package root, in the order given, the finder yields:

1. Packages found by scanning the root's directories, merged across every
   namespace that resolves the root. Each package is followed directly by
   its sub-packages.
2. Packages whose namespace is itself declared as a direct child of the
   root, merged by identifier in first-seen order.

Discovery is lazy: nothing is scanned until the consumer pulls the next
package, and a consumer may stop at any point.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pkgdoc.domain.types import NamespaceLike
from pkgdoc.infrastructure.filesystem import iter_nested_files
from pkgdoc.infrastructure.namespace import Namespace
from pkgdoc.infrastructure.package import Package
from pkgdoc.infrastructure.readme import README_FILENAME

logger = logging.getLogger(__name__)


class Finder:
    """Iterable over the packages found beneath a set of package roots.

    Args:
        namespaces: All known namespace bindings. Several entries may share
            an identifier when a namespace is split across directories.
        package_roots: Identifiers to search beneath for packages.
    """

    def __init__(self, namespaces: Iterable[NamespaceLike], package_roots: Iterable[str]) -> None:
        self._namespaces = tuple(namespaces)
        self._package_roots = tuple(package_roots)

    @property
    def package_roots(self) -> tuple[str, ...]:
        return self._package_roots

    def __iter__(self) -> Iterator[Package]:
        for root in self._package_roots:
            yield from self._find_in_root(root)

    def _find_in_root(self, root: str) -> Iterator[Package]:
        root_paths: list[Path] = []
        packages: dict[str, list[Path]] = {}

        for namespace in self._namespaces:
            # The root lives inside this namespace: scan its directories later.
            found = namespace.find_namespace(root)
            if found is not None:
                root_paths.extend(found.paths)

            # The namespace is itself a package directly beneath the root.
            if namespace.parent_id == root:
                packages.setdefault(namespace.id, []).extend(namespace.paths)

        logger.debug(
            "Searching package root %s: %d root paths, %d declared packages",
            root,
            len(root_paths),
            len(packages),
        )

        if root_paths:
            yield from self._scan_namespace(Namespace(root, *root_paths))

        for identifier, paths in packages.items():
            yield from self._load_package(Namespace(identifier, *paths))

    def _scan_namespace(
        self, root: NamespaceLike, parent: Package | None = None
    ) -> Iterator[Package]:
        for namespace in root.iterate_namespaces():
            yield from self._load_package(namespace, parent)

    def _load_package(
        self, namespace: NamespaceLike, parent: Package | None = None
    ) -> Iterator[Package]:
        package = Package(namespace, parent)
        yield package

        # One tier of sub-packages only: sub-packages are never searched.
        if parent is None:
            yield from self._find_sub_packages(package)

    def _find_sub_packages(self, package: Package) -> Iterator[Package]:
        # A single nested readme marks every child directory as a sub-package.
        marker = next(iter_nested_files(package.paths, README_FILENAME), None)
        if marker is None:
            return
        logger.debug("Sub-packages of %s inferred from %s", package.id, marker)
        yield from self._scan_namespace(package, package)
