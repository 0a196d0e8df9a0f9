"""Subcommand modules for pkgdoc.

Provides register_commands() which uses deferred imports to keep
``pkgdoc --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pkgdoc.commands.discover import discover
    from pkgdoc.commands.export import export
    from pkgdoc.commands.namespaces import namespaces
    from pkgdoc.commands.show import show

    cli.add_command(namespaces)
    cli.add_command(discover)
    cli.add_command(show)
    cli.add_command(export)
