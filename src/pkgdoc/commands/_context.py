"""AppContext — the object Click hands to every command.

Built once by the root group from the resolved settings. It configures
logging, owns the lazily created Project, and turns ServiceResults into
output and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgdoc.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pkgdoc.config.settings import PkgdocSettings
    from pkgdoc.infrastructure.project import Project
    from pkgdoc.services.result import ServiceResult


class AppContext:
    """Shared state for one CLI invocation."""

    def __init__(self, settings: PkgdocSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._project: Project | None = None

        from pkgdoc.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            from pkgdoc.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def project(self) -> Project:
        """The project, created on first use so ``--help`` never reads the manifest."""
        if self._project is None:
            from pkgdoc.infrastructure.project import Project

            self._project = Project(self.settings)
        return self._project

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout with warnings on stderr; in JSON
        mode warnings stay inside the payload. Failures go to stderr.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
