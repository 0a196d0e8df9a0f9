"""Error kinds raised by discovery and documentation loading.

All errors are raised synchronously at construction or first use and are
never retried. The service layer maps them to :class:`ServiceError` codes.
"""

from __future__ import annotations

import os


class PkgdocError(Exception):
    """Base class for all pkgdoc errors."""

    code = "PKGDOC_ERROR"


class InvalidIdentifier(PkgdocError, ValueError):
    """A namespace identifier contains characters outside ``[\\w\\\\]``."""

    code = "INVALID_IDENTIFIER"

    def __init__(self, identifier: str, *, reason: str | None = None) -> None:
        self.identifier = identifier
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Invalid namespace identifier: '{identifier}'{detail}")


class InvalidPath(PkgdocError, ValueError):
    """A path supplied for a namespace does not exist."""

    code = "INVALID_PATH"

    def __init__(self, path: str | os.PathLike[str], *, reason: str | None = None) -> None:
        self.path = os.fspath(path)
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Invalid path: {self.path!r}{detail}")


class ManifestError(PkgdocError, ValueError):
    """The manifest file is missing or unreadable."""

    code = "MANIFEST_ERROR"


class AmbiguousDocumentation(PkgdocError):
    """More than one documentation file was found for a single package."""

    code = "AMBIGUOUS_DOCUMENTATION"

    def __init__(self, package_id: str, paths: list[str]) -> None:
        self.package_id = package_id
        self.paths = paths
        super().__init__(f"Multiple documentation files found in package '{package_id}'.")
