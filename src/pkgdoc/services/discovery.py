"""DiscoveryService — find packages and inspect a single package.

Both operations pull lazily from a :class:`Finder`: ``discover`` stops
after *limit* packages, and ``show`` stops as soon as the requested
package and its sub-packages have been emitted.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any

from pkgdoc.domain.errors import PkgdocError
from pkgdoc.domain.identifiers import trim_identifier
from pkgdoc.infrastructure.package import Package
from pkgdoc.infrastructure.readme import Readme
from pkgdoc.services.base import BaseService
from pkgdoc.services.result import ServiceResult
from pkgdoc.services.telemetry import trace_span, traced

NO_PACKAGE_ROOTS = "NO_PACKAGE_ROOTS"
NOT_FOUND = "NOT_FOUND"


class DiscoveryService(BaseService):
    """Discover packages beneath the project's package roots."""

    def _roots_or_error(
        self, op: str, package_roots: Sequence[str] | None
    ) -> tuple[tuple[str, ...], ServiceResult | None]:
        roots = self._project.package_roots(package_roots)
        if roots:
            return roots, None
        return roots, self._error(
            op,
            NO_PACKAGE_ROOTS,
            "No package roots given; pass them as arguments or set "
            "[discovery] package_roots in pkgdoc.toml",
        )

    @traced
    def discover(
        self,
        package_roots: Sequence[str] | None = None,
        *,
        limit: int | None = None,
    ) -> ServiceResult:
        """List packages in discovery order.

        Args:
            package_roots: Roots to search; defaults to the configured roots.
            limit: Stop after this many packages.
        """
        roots, error = self._roots_or_error("discover", package_roots)
        if error is not None:
            return error

        try:
            with trace_span("load_manifest"):
                finder = self._project.finder(roots)
            with trace_span("scan") as span:
                packages = list(islice(finder, limit))
                if span is not None:
                    span.annotate("packages", len(packages))
        except (PkgdocError, OSError) as exc:
            return self._failure("discover", exc)

        items = [p.to_dict() for p in packages]
        sub_count = sum(1 for p in packages if p.is_sub_package)
        warnings: list[str] = []
        if not packages:
            warnings.append(f"No packages found beneath {', '.join(roots)}")

        return ServiceResult(
            ok=True,
            op="discover",
            data={
                "package_roots": list(roots),
                "items": items,
                "count": len(items),
                "root_count": len(items) - sub_count,
                "sub_package_count": sub_count,
            },
            warnings=warnings,
        )

    @traced
    def show(
        self,
        package_id: str,
        package_roots: Sequence[str] | None = None,
        *,
        html: bool = False,
    ) -> ServiceResult:
        """Describe one package and its readme.

        Sub-packages are emitted directly after their parent, so scanning
        stops at the first package that is not a child of the match.
        """
        roots, error = self._roots_or_error("show", package_roots)
        if error is not None:
            return error

        target = trim_identifier(package_id)
        try:
            package, children = self._locate(self._project.finder(roots), target)
            if package is None:
                return self._error("show", NOT_FOUND, f"Package not found: {target}", id=target)
            with trace_span("readme"):
                readme = Readme(package)
                data: dict[str, Any] = {
                    **package.to_dict(),
                    "sub_packages": [child.id for child in children],
                    "has_readme": readme.exists(),
                    "readme_path": str(readme.path) if readme.path else None,
                    "readme": readme.content,
                }
                if html:
                    data["html"] = readme.content_as_html()
        except (PkgdocError, OSError) as exc:
            return self._failure("show", exc)

        warnings: list[str] = []
        if not readme.exists():
            warnings.append(f"Package {package.id} has no readme.md")
        elif not readme.is_utf8():
            warnings.append(f"{readme.path} is not valid UTF-8; undecodable bytes were replaced")
        return ServiceResult(ok=True, op="show", data=data, warnings=warnings)

    @staticmethod
    def _locate(
        packages: Iterable[Package], target: str
    ) -> tuple[Package | None, list[Package]]:
        iterator = iter(packages)
        for package in iterator:
            if package.id == target:
                break
        else:
            return None, []

        children: list[Package] = []
        if not package.is_sub_package:
            for child in iterator:
                if child.parent is not package:
                    break
                children.append(child)
        return package, children
