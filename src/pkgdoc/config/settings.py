"""Unified settings — CLI flags, env vars, and ``pkgdoc.toml`` in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PKGDOC_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``pkgdoc.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from pkgdoc.config.discovery import find_config, find_project_root
from pkgdoc.config.models import DiscoveryConfig, ExportConfig

# The TOML file for the settings instance under construction.
_toml_path: ContextVar[Path | None] = ContextVar("pkgdoc_toml_path", default=None)


class PkgdocSettings(BaseSettings):
    """Unified settings for the pkgdoc CLI.

    Attributes:
        project_root: Directory the manifest path is relative to.
        config_path: The ``pkgdoc.toml`` in use, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="PKGDOC_",
        env_nested_delimiter="__",
    )

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @property
    def manifest_path(self) -> Path:
        return self.project_root / self.discovery.manifest

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI flags, then env vars, then the TOML file; no dotenv or secrets."""
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_path = _toml_path.get()
        if toml_path is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> PkgdocSettings:
        """Construct settings from a CLI invocation.

        The project root is *project_root* when given, else the directory
        of the config file, else the nearest directory holding the default
        manifest, else CWD. An explicit *config_path* that is not a file is
        ignored.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None and toml_path is not None:
            project_root = toml_path.parent
        if project_root is None:
            project_root = find_project_root(DiscoveryConfig().manifest) or Path.cwd()

        token = _toml_path.set(toml_path)
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_path.reset(token)
