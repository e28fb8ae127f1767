"""Bounded bidirectional proximity search over tree-shaped structures.

A search radiates out from a starting node in rings of increasing distance,
walking toward the root and into subtrees at the same time:

    ring 0: the start node
    ring 1: children of the start, then its parent
    ring 2: grandchildren, siblings (the parent's other children), grandparent
    ...

Each ring holds exactly the nodes at that edge distance from the start, so a
larger radius only appends rings; it never reorders the earlier ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class TreeNode(ABC, Generic[T]):
    """A node of a lazily enumerated tree.

    Implementations must compare equal when they denote the same node; the
    search relies on this to avoid descending back into the subtree it came
    from.
    """

    @property
    @abstractmethod
    def content(self) -> T:
        """Value yielded by searches for this node."""

    @abstractmethod
    def parent(self) -> TreeNode[T] | None:
        """Enclosing node, or None at the root."""

    @abstractmethod
    def children(self) -> Iterable[TreeNode[T]]:
        """Immediate children in a stable order."""

    def search(self, radius: int) -> Iterator[T]:
        """Contents of all nodes within ``radius`` edges, nearest first."""
        return proximity_search(self, radius)


def proximity_search(start: TreeNode[T], radius: int) -> Iterator[T]:
    """Yield contents of nodes reachable within ``radius`` edges of ``start``.

    The descendant fringe of each ring is yielded in discovery order, followed
    by the ring's ancestor. Children are only enumerated when the consumer
    asks for the next ring, so stopping early (e.g. at the first directory
    with a marker file) never reads beyond it.

    Raises:
        ValueError: If radius is negative.
    """
    if radius < 0:
        raise ValueError(f"Search radius must be non-negative, got {radius}")
    return _rings(start, radius)


def _rings(start: TreeNode[T], radius: int) -> Iterator[T]:
    ancestor: TreeNode[T] | None = start
    came_from: TreeNode[T] | None = None
    fringe: list[TreeNode[T]] = []

    for ring in range(radius + 1):
        if ancestor is None and not fringe:
            return

        for node in fringe:
            yield node.content
        if ancestor is not None:
            yield ancestor.content

        if ring == radius:
            return

        next_fringe = [child for node in fringe for child in node.children()]
        if ancestor is not None:
            next_fringe.extend(child for child in ancestor.children() if child != came_from)
            came_from, ancestor = ancestor, ancestor.parent()
        fringe = next_fringe
