"""Root CLI group for pkgdoc with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from pkgdoc import __version__
from pkgdoc.commands import register_commands
from pkgdoc.commands._context import AppContext
from pkgdoc.config.settings import PkgdocSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pkgdoc")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (package ids only).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing details.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-r",
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory holding the manifest.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    project_root: Path | None,
) -> None:
    """pkgdoc — discover PSR-4 packages and their documentation."""
    try:
        settings = PkgdocSettings.from_cli(
            config_path=config_path,
            project_root=project_root,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
