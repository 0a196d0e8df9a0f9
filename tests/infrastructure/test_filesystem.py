"""Tests for filesystem lookups — path resolution, listing, nested files."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgdoc.infrastructure.filesystem import (
    find_named_file,
    iter_nested_files,
    iter_subdirectories,
    real_path,
)


class TestRealPath:
    def test_missing_returns_none(self, tmp_path: Path) -> None:
        assert real_path(tmp_path / "nope") is None

    def test_normalizes_dot_segments(self, build_tree) -> None:
        root = build_tree("real", "a/")
        assert real_path(f"{root}/a/../a") == root / "a"

    def test_relative_to_cwd(self, build_tree, monkeypatch: pytest.MonkeyPatch) -> None:
        root = build_tree("rel", "a/")
        monkeypatch.chdir(root)
        assert real_path("a") == root / "a"

    def test_follows_symlinks(self, build_tree) -> None:
        root = build_tree("links", "target/")
        (root / "link").symlink_to(root / "target", target_is_directory=True)
        assert real_path(root / "link") == root / "target"


class TestIterSubdirectories:
    def test_lists_directories_only(self, build_tree) -> None:
        root = build_tree("dirs", "B/", "A/", "file.php")
        assert [p.name for p in iter_subdirectories([root])] == ["A", "B"]

    def test_skips_hidden(self, build_tree) -> None:
        root = build_tree("hidden", ".git/", "A/")
        assert [p.name for p in iter_subdirectories([root])] == ["A"]

    def test_skips_vcs_directories(self, build_tree) -> None:
        root = build_tree("vcs", "CVS/", "_svn/", "_darcs/", "Svn/", "A/")
        assert [p.name for p in iter_subdirectories([root])] == ["A", "Svn"]

    def test_visits_paths_in_order(self, build_tree) -> None:
        first = build_tree("first", "Z/")
        second = build_tree("second", "A/")
        assert list(iter_subdirectories([first, second])) == [first / "Z", second / "A"]

    def test_depth_is_one(self, build_tree) -> None:
        root = build_tree("deep", "A/B/C/")
        assert [p.name for p in iter_subdirectories([root])] == ["A"]


class TestFindNamedFile:
    def test_found(self, build_tree) -> None:
        root = build_tree("named", "readme.md")
        assert find_named_file(root, "readme.md") == root / "readme.md"

    def test_case_sensitive(self, build_tree) -> None:
        root = build_tree("upper", "README.md")
        assert find_named_file(root, "readme.md") is None

    def test_directory_is_not_a_file(self, build_tree) -> None:
        root = build_tree("dir_named", "readme.md/")
        assert find_named_file(root, "readme.md") is None


class TestIterNestedFiles:
    def test_only_one_level_down(self, build_tree) -> None:
        root = build_tree("nested", "readme.md", "A/readme.md", "B/C/readme.md")
        assert list(iter_nested_files([root], "readme.md")) == [root / "A" / "readme.md"]

    def test_across_paths(self, build_tree) -> None:
        first = build_tree("nested_a", "A/readme.md")
        second = build_tree("nested_b", "B/readme.md")
        found = list(iter_nested_files([first, second], "readme.md"))
        assert found == [first / "A" / "readme.md", second / "B" / "readme.md"]

    def test_none(self, build_tree) -> None:
        root = build_tree("none", "A/", "B/other.md")
        assert list(iter_nested_files([root], "readme.md")) == []
