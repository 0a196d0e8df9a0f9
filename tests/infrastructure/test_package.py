"""Tests for Package — delegation to its namespace and parent linkage."""

from __future__ import annotations

from pathlib import Path

from pkgdoc.domain.types import PackageLike
from pkgdoc.infrastructure.namespace import Namespace
from pkgdoc.infrastructure.package import Package


class TestPackage:
    def test_creation(self, fixtures_root: Path) -> None:
        package = Package(Namespace("Test", fixtures_root))
        assert package.id == "Test"
        assert package.paths == (fixtures_root,)
        assert package.parent_id is None

    def test_without_parent(self, fixtures_root: Path) -> None:
        package = Package(Namespace("Test", fixtures_root))
        assert package.is_sub_package is False
        assert package.parent is None

    def test_with_parent(self, fixtures_root: Path) -> None:
        parent = Package(Namespace("Test", fixtures_root))
        package = Package(Namespace("Test\\Sub", fixtures_root), parent)
        assert package.is_sub_package is True
        assert package.parent is parent
        assert package.parent_id == "Test"

    def test_satisfies_protocol(self, fixtures_root: Path) -> None:
        assert isinstance(Package(Namespace("Test", fixtures_root)), PackageLike)

    def test_delegates_lookup(self, build_tree) -> None:
        root = build_tree("delegate", "A/B/")
        package = Package(Namespace("Test", root))
        found = package.find_namespace("Test\\A\\B")
        assert found is not None
        assert found.paths == (root / "A" / "B",)
        assert [ns.id for ns in package.iterate_namespaces()] == ["Test\\A"]

    def test_identity_equality(self, fixtures_root: Path) -> None:
        namespace = Namespace("Test", fixtures_root)
        assert Package(namespace) != Package(namespace)

    def test_to_dict(self, fixtures_root: Path) -> None:
        parent = Package(Namespace("Test", fixtures_root))
        package = Package(Namespace("Test\\Sub", fixtures_root), parent)
        assert package.to_dict() == {
            "id": "Test\\Sub",
            "paths": [str(fixtures_root)],
            "parent": "Test",
            "sub_package": True,
        }
