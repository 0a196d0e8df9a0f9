"""Command: discover packages beneath package roots."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgdoc.commands._base import PkgCommand

if TYPE_CHECKING:
    from pkgdoc.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgdoc discover
  pkgdoc discover 'Company'
  pkgdoc discover 'Company\\Root1' 'Company\\Root2'
  pkgdoc discover --limit 10
  pkgdoc -q discover""",
)
@click.argument("roots", nargs=-1)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many packages.",
)
@click.pass_obj
def discover(app: AppContext, roots: tuple[str, ...], limit: int | None) -> None:
    """Discover packages beneath ROOTS (default: configured package roots)."""
    from pkgdoc.services.discovery import DiscoveryService

    app.emit(DiscoveryService(app.project).discover(roots or None, limit=limit))
