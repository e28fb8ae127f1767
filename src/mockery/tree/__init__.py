"""Proximity search over trees: generic nodes and filesystem directories."""

from mockery.tree.filesystem import DirectoryNode
from mockery.tree.search import TreeNode, proximity_search

__all__ = ["DirectoryNode", "TreeNode", "proximity_search"]
