"""Project — the single dependency injected into every service.

A project is a directory holding a manifest. It owns manifest loading and
hands out finders over the declared namespaces. The manifest is read
lazily on first use, so ``--help`` and ``--version`` never touch the
filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from pkgdoc.infrastructure.finder import Finder
from pkgdoc.infrastructure.manifest import ComposerJson

if TYPE_CHECKING:
    from pkgdoc.config.settings import PkgdocSettings
    from pkgdoc.infrastructure.namespace import Namespace

logger = logging.getLogger(__name__)


class Project:
    """A PSR-4 project rooted at ``settings.project_root``."""

    def __init__(self, settings: PkgdocSettings) -> None:
        self._settings = settings
        self._manifest: ComposerJson | None = None

    @property
    def settings(self) -> PkgdocSettings:
        return self._settings

    @property
    def root(self) -> Path:
        return self._settings.project_root

    @property
    def manifest(self) -> ComposerJson:
        """The parsed manifest (loaded on first access)."""
        if self._manifest is None:
            path = self._settings.manifest_path
            logger.debug("Loading manifest %s", path)
            self._manifest = ComposerJson(
                path, include_dev=self._settings.discovery.include_dev
            )
        return self._manifest

    @property
    def namespaces(self) -> list[Namespace]:
        return self.manifest.namespaces

    def package_roots(self, override: Sequence[str] | None = None) -> tuple[str, ...]:
        """Return *override* when given, else the configured package roots."""
        if override:
            return tuple(override)
        return self._settings.discovery.package_roots

    def finder(self, package_roots: Sequence[str] | None = None) -> Finder:
        """Build a finder over the manifest's namespaces."""
        return Finder(self.namespaces, self.package_roots(package_roots))
