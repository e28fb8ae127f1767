"""Tests for filesystem directory nodes."""

from pathlib import Path

import pytest

from mockery.tree import DirectoryNode


@pytest.fixture
def layout(tmp_path: Path) -> Path:
    """root/{a/{x}, b, c.txt}"""
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "x").mkdir(parents=True)
    (tmp_path / "c.txt").write_text("not a directory")
    return tmp_path


class TestDirectoryNode:
    """DirectoryNode navigation tests."""

    def test_children_are_sorted_subdirectories(self, layout: Path) -> None:
        """Files are skipped; subdirectories come in name order."""
        children = DirectoryNode(layout).children()
        assert [c.path for c in children] == [layout / "a", layout / "b"]

    def test_parent_of_root_is_none(self) -> None:
        """The filesystem root has no parent."""
        root = Path(Path.cwd().anchor)
        assert DirectoryNode(root).parent() is None

    def test_parent_walks_up(self, layout: Path) -> None:
        """parent() is the containing directory."""
        assert DirectoryNode(layout / "a" / "x").parent() == DirectoryNode(layout / "a")

    def test_missing_directory_has_no_children(self, tmp_path: Path) -> None:
        """Unreadable directories are leaves rather than errors."""
        assert DirectoryNode(tmp_path / "gone").children() == []

    def test_search_finds_sibling_subtree(self, layout: Path) -> None:
        """From a/x, the sibling b is three edges away."""
        found = list(DirectoryNode(layout / "a" / "x").search(3))
        assert found[:3] == [layout / "a" / "x", layout / "a", layout]
        assert layout / "b" in found
