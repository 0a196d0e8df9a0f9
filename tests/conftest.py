"""Shared pytest fixtures and test helpers for pkgdoc tests.

Fixture trees are built on ``tmp_path`` from compact specs: an entry
ending in ``/`` is a directory, anything else is a file whose parent
directories are created as needed.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from pkgdoc.config.models import DiscoveryConfig
from pkgdoc.config.settings import PkgdocSettings
from pkgdoc.infrastructure.project import Project

BuildTree = Callable[..., Path]


def _build(root: Path, entries: tuple[str, ...], files: dict[str, str]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for entry in entries:
        target = root / entry
        if entry.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")
    for name, content in files.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content.encode("utf-8"))
    return root.resolve()


@pytest.fixture
def fixtures_root(tmp_path: Path) -> Path:
    """Canonical root for fixture trees (tmp_path may sit behind a symlink)."""
    root = tmp_path / "fixtures"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def build_tree(fixtures_root: Path) -> BuildTree:
    """Return ``build(name, *entries, files=None) -> Path`` under ``fixtures_root``."""

    def build(name: str, *entries: str, files: dict[str, str] | None = None) -> Path:
        return _build(fixtures_root / name, entries, files or {})

    return build


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


COMPOSER_JSON = {
    "name": "company/shop",
    "autoload": {
        "psr-4": {
            "Company\\": "src/",
            "Vendor\\Missing\\": "does-not-exist/",
        }
    },
    "autoload-dev": {
        "psr-4": {
            "Company\\": ["tests/"],
        }
    },
}


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary composer project with a split ``Company`` namespace.

    ``src/`` holds ``Library`` (with two sub-packages, one documented) and
    ``Orders``; ``tests/`` adds a second ``Library`` directory and ``Tools``.
    """
    root = _build(
        tmp_path / "project",
        (
            "src/Library/Sub2/Thing.php",
            "src/Orders/Order.php",
            "tests/Library/LibraryTest.php",
            "tests/Tools/",
        ),
        {
            "composer.json": json.dumps(COMPOSER_JSON),
            "src/Library/readme.md": "# Library\nShared helpers.\n",
            "src/Library/Sub1/readme.md": "# Sub1\n",
        },
    )
    return root


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Change CWD to the temp project so the CLI discovers it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)
    monkeypatch.delenv("PKGDOC_CONFIG", raising=False)
    (project_root / "pkgdoc.toml").write_text(
        '[discovery]\npackage_roots = ["Company"]\n', encoding="utf-8"
    )
    yield


@pytest.fixture
def project(project_root: Path) -> Project:
    """Project over ``project_root`` with ``Company`` as its package root."""
    settings = PkgdocSettings(
        project_root=project_root,
        discovery=DiscoveryConfig(package_roots=("Company",)),
    )
    return Project(settings)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """``--verbose`` enables telemetry for the whole context; switch it off again."""
    from pkgdoc.services.telemetry import disable_telemetry

    yield
    disable_telemetry()
