"""NamespaceService — the namespaces a project's manifest declares."""

from __future__ import annotations

from pkgdoc.domain.errors import PkgdocError
from pkgdoc.services.base import BaseService
from pkgdoc.services.result import ServiceResult
from pkgdoc.services.telemetry import traced


class NamespaceService(BaseService):
    """List namespace bindings from the manifest."""

    @traced
    def list_namespaces(self) -> ServiceResult:
        """One item per (identifier, path) binding, in manifest order.

        A split namespace appears once per directory it is mapped to.
        """
        try:
            namespaces = self._project.namespaces
        except (PkgdocError, OSError) as exc:
            return self._failure("list_namespaces", exc)

        items = [{"id": ns.id, "paths": [str(p) for p in ns.paths]} for ns in namespaces]
        return ServiceResult(
            ok=True,
            op="list_namespaces",
            data={
                "manifest": str(self._project.manifest.path),
                "items": items,
                "count": len(items),
            },
        )
