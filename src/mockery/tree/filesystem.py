"""Filesystem directories as search tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from mockery.tree.search import TreeNode

log = structlog.get_logger()


def _is_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


@dataclass(frozen=True)
class DirectoryNode(TreeNode[Path]):
    """A directory; its children are its immediate subdirectories.

    ``path`` should be absolute so that ``parent()`` can walk to the root.
    Files are not children. Unreadable directories have no children.
    """

    path: Path

    @property
    def content(self) -> Path:
        return self.path

    def parent(self) -> DirectoryNode | None:
        parent = self.path.parent
        if parent == self.path:
            return None
        return DirectoryNode(parent)

    def children(self) -> list[DirectoryNode]:
        try:
            entries = sorted(self.path.iterdir())
        except OSError as e:
            log.debug("tree.unreadable_directory", path=str(self.path), error=str(e))
            return []
        return [DirectoryNode(entry) for entry in entries if _is_directory(entry)]
