"""Command: show one package and its readme."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgdoc.commands._base import PkgCommand

if TYPE_CHECKING:
    from pkgdoc.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgdoc show 'Company\\Library'
  pkgdoc show 'Company\\Library\\Sub1' --root Company
  pkgdoc --json show 'Company\\Library' --html
  pkgdoc -q show 'Company\\Library' > readme.md""",
)
@click.argument("package_id")
@click.option("--root", "roots", multiple=True, help="Package root to search (repeatable).")
@click.option("--html", is_flag=True, help="Include the readme rendered as HTML.")
@click.pass_obj
def show(app: AppContext, package_id: str, roots: tuple[str, ...], html: bool) -> None:
    """Show PACKAGE_ID, its sub-packages, and its readme."""
    from pkgdoc.services.discovery import DiscoveryService

    app.emit(DiscoveryService(app.project).show(package_id, roots or None, html=html))
