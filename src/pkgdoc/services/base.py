"""BaseService — shared foundation for pkgdoc services.

Every service receives a :class:`Project` at construction time and
converts the core's exceptions into failed ServiceResults at its public
boundary.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pkgdoc.domain.errors import PkgdocError
from pkgdoc.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pkgdoc.infrastructure.project import Project

logger = logging.getLogger(__name__)

FILESYSTEM_ERROR = "FILESYSTEM_ERROR"


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class DiscoveryService(BaseService):
            def discover(self) -> ServiceResult:
                try:
                    packages = list(self._project.finder())
                except (PkgdocError, OSError) as exc:
                    return self._failure("discover", exc)
                ...
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    @staticmethod
    def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _failure(self, op: str, exc: PkgdocError | OSError) -> ServiceResult:
        """Convert a core or filesystem exception into a failed result."""
        logger.debug("%s failed", op, exc_info=True)
        if isinstance(exc, PkgdocError):
            return self._error(op, exc.code, str(exc))
        detail: dict[str, Any] = {}
        if exc.filename is not None:
            detail["path"] = str(exc.filename)
        return self._error(op, FILESYSTEM_ERROR, exc.strerror or str(exc), **detail)
