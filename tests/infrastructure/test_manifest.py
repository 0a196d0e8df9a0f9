"""Tests for composer.json namespace parsing."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pkgdoc.domain.errors import ManifestError
from pkgdoc.infrastructure.manifest import ComposerJson
from pkgdoc.infrastructure.namespace import Namespace

MANIFEST = {
    "autoload": {
        "psr-4": {
            "Test\\Package1\\": "root1/Package1/",
            "Test\\Package3\\": "root2/Package3",
            "Test\\Missing\\": "not-a-directory/",
        }
    },
    "autoload-dev": {"psr-4": {"Test\\": ["root1/"]}},
}


@pytest.fixture
def manifest_dir(build_tree) -> Path:
    return build_tree(
        "manifest",
        "root1/Package1/",
        "root2/Package3/",
        files={"composer.json": json.dumps(MANIFEST)},
    )


class TestParsing:
    def test_parsing(self, manifest_dir: Path) -> None:
        result = ComposerJson(manifest_dir / "composer.json").namespaces
        assert all(isinstance(ns, Namespace) for ns in result)
        assert [ns.id for ns in result] == ["Test\\Package1", "Test\\Package3", "Test"]
        assert result[0].paths == (manifest_dir / "root1" / "Package1",)
        assert result[2].paths == (manifest_dir / "root1",)

    def test_without_dev(self, manifest_dir: Path) -> None:
        result = ComposerJson(manifest_dir / "composer.json", include_dev=False).namespaces
        assert [ns.id for ns in result] == ["Test\\Package1", "Test\\Package3"]

    def test_list_of_paths_gives_one_namespace_each(self, build_tree) -> None:
        data = {"autoload": {"psr-4": {"App\\": ["a/", "b/"]}}}
        root = build_tree("listed", "a/", "b/", files={"composer.json": json.dumps(data)})
        result = ComposerJson(root / "composer.json").namespaces
        assert [ns.paths for ns in result] == [(root / "a",), (root / "b",)]

    def test_fallback_namespace_is_skipped(self, build_tree) -> None:
        data = {"autoload": {"psr-4": {"": "lib/", "App\\": "app/"}}}
        root = build_tree("fallback", "lib/", "app/", files={"composer.json": json.dumps(data)})
        result = ComposerJson(root / "composer.json").namespaces
        assert [ns.id for ns in result] == ["App"]

    def test_no_autoload(self, build_tree) -> None:
        root = build_tree("bare", files={"composer.json": '{"name": "x/y"}'})
        assert ComposerJson(root / "composer.json").namespaces == []

    def test_path(self, manifest_dir: Path) -> None:
        assert ComposerJson(manifest_dir / "composer.json").path == manifest_dir / "composer.json"

    def test_namespaces_is_a_copy(self, manifest_dir: Path) -> None:
        manifest = ComposerJson(manifest_dir / "composer.json")
        manifest.namespaces.clear()
        assert len(manifest.namespaces) == 3


class TestInvalid:
    def test_invalid_file(self, fixtures_root: Path) -> None:
        with pytest.raises(ManifestError, match="not found"):
            ComposerJson(fixtures_root / "not-a-real-composer.json")

    def test_directory(self, fixtures_root: Path) -> None:
        with pytest.raises(ManifestError):
            ComposerJson(fixtures_root)

    def test_invalid_json(self, build_tree) -> None:
        root = build_tree("broken", files={"composer.json": "{not json"})
        with pytest.raises(ManifestError, match="Invalid JSON"):
            ComposerJson(root / "composer.json")

    def test_non_object(self, build_tree) -> None:
        root = build_tree("array", files={"composer.json": "[]"})
        with pytest.raises(ManifestError, match="JSON object"):
            ComposerJson(root / "composer.json")

    def test_invalid_encoding(self, build_tree) -> None:
        root = build_tree("latin1")
        (root / "composer.json").write_bytes(b"\xff{}")
        with pytest.raises(ManifestError, match="Invalid JSON"):
            ComposerJson(root / "composer.json")

    def test_psr4_not_an_object(self, build_tree) -> None:
        root = build_tree("bad_psr4", files={"composer.json": '{"autoload": {"psr-4": ["x"]}}'})
        with pytest.raises(ManifestError, match="psr-4"):
            ComposerJson(root / "composer.json")
