"""Command: export package readmes as a static HTML site."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pkgdoc.commands._base import PkgCommand

if TYPE_CHECKING:
    from pkgdoc.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgdoc export build/docs
  pkgdoc export build/docs --root 'Company\\Project'
  pkgdoc --json export /tmp/docs""",
)
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option("--root", "roots", multiple=True, help="Package root to export (repeatable).")
@click.pass_obj
def export(app: AppContext, output_dir: Path, roots: tuple[str, ...]) -> None:
    """Write one HTML page per documented package plus an index to OUTPUT_DIR."""
    from pkgdoc.services.export import ExportService

    app.emit(ExportService(app.project).export_html(output_dir, roots or None))
