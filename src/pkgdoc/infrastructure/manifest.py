"""Namespace declarations parsed from a ``composer.json`` manifest.

Both the ``autoload`` and ``autoload-dev`` PSR-4 maps are read, in that
order. Each entry maps an identifier to one path or a list of paths,
relative to the manifest's directory.

Declared paths that do not exist are skipped silently, as is the fallback
entry keyed by the empty namespace, whereas a :class:`Namespace` refuses a
missing path outright. The manifest describes
what a project *may* contain; a namespace describes what it *does*.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pkgdoc.domain.errors import ManifestError
from pkgdoc.domain.identifiers import trim_identifier
from pkgdoc.infrastructure.filesystem import real_path
from pkgdoc.infrastructure.namespace import Namespace

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "composer.json"
AUTOLOAD_SECTIONS = ("autoload", "autoload-dev")


class ComposerJson:
    """The PSR-4 namespaces declared by a ``composer.json`` file.

    Args:
        json_path: Path to the manifest.
        include_dev: Also read the ``autoload-dev`` section.

    Raises:
        ManifestError: If the manifest does not exist or is not valid JSON.
    """

    def __init__(self, json_path: str | os.PathLike[str], *, include_dev: bool = True) -> None:
        path = real_path(json_path)
        if path is None or not path.is_file():
            msg = f"Manifest not found: {os.fspath(json_path)}"
            raise ManifestError(msg)
        self._path = path
        sections = AUTOLOAD_SECTIONS if include_dev else AUTOLOAD_SECTIONS[:1]
        self._namespaces = self._parse_file(path, sections)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def namespaces(self) -> list[Namespace]:
        """The declared namespaces, in declaration order."""
        return list(self._namespaces)

    def _parse_file(self, path: Path, sections: tuple[str, ...]) -> list[Namespace]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise ManifestError(msg) from exc
        if not isinstance(data, dict):
            msg = f"Manifest {path} must contain a JSON object"
            raise ManifestError(msg)

        namespaces: list[Namespace] = []
        for section in sections:
            autoload = data.get(section)
            config = (autoload.get("psr-4") if isinstance(autoload, dict) else None) or {}
            if not isinstance(config, dict):
                msg = f"'{section}.psr-4' in {path} must be an object"
                raise ManifestError(msg)
            namespaces.extend(self._parse_namespaces(config, path.parent))
        return namespaces

    def _parse_namespaces(self, config: dict[str, Any], root: Path) -> Iterator[Namespace]:
        for name, paths in config.items():
            if not trim_identifier(name):
                logger.debug("Skipping fallback namespace %r with paths %r", name, paths)
                continue
            for relative in paths if isinstance(paths, list) else [paths]:
                path = real_path(f"{root}/{relative}")
                if path is None:
                    logger.debug("Skipping missing path %r for namespace %r", relative, name)
                    continue
                yield Namespace(name, path)
