"""Command: list namespaces declared by the manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgdoc.commands._base import PkgCommand

if TYPE_CHECKING:
    from pkgdoc.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgdoc namespaces
  pkgdoc --json namespaces
  pkgdoc -r ~/src/shop namespaces""",
)
@click.pass_obj
def namespaces(app: AppContext) -> None:
    """List the PSR-4 namespaces declared in the manifest."""
    from pkgdoc.services.namespaces import NamespaceService

    app.emit(NamespaceService(app.project).list_namespaces())
