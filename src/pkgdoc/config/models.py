"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pkgdoc.toml only contains
overrides. A PHP project with a ``composer.json`` at its root needs only
``[discovery] package_roots``.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from pkgdoc.domain.identifiers import normalize_identifier


class DiscoveryConfig(BaseModel):
    """[discovery] section."""

    model_config = {"frozen": True}

    manifest: str = "composer.json"
    package_roots: tuple[str, ...] = ()
    include_dev: bool = True

    @field_validator("package_roots")
    @classmethod
    def _check_roots(cls, roots: tuple[str, ...]) -> tuple[str, ...]:
        for root in roots:
            normalize_identifier(root)
        return roots


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    title: str = "Package documentation"
    include_undocumented: bool = False

