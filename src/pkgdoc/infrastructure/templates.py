"""Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

OVERRIDE_DIR = ".pkgdoc/templates"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults.

    Overrides are read from ``.pkgdoc/templates/{group}/`` and then
    ``.pkgdoc/templates/`` inside the project. HTML templates are
    autoescaped; rendered readme HTML must be passed through ``|safe``.
    """
    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("pkgdoc", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["html", "j2"]),
        keep_trailing_newline=True,
    )
