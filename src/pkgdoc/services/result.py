"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Public service methods return a ServiceResult and never raise
for expected failures (bad identifiers, missing manifests, ambiguous
readmes). The CLI renders the result; scripts consume it as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is one of the stable error codes (``INVALID_IDENTIFIER``,
    ``INVALID_PATH``, ``MANIFEST_ERROR``, ``AMBIGUOUS_DOCUMENTATION``,
    ``NOT_FOUND``, ``NO_PACKAGE_ROOTS``, ``FILESYSTEM_ERROR``).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"discover"``, ``"show"``, ...), used to pick a renderer.
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered along the way.
        error: Set when ``ok`` is False.
        meta: Optional timing data, filled in under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
