"""Red-black tree that keeps its leftmost node cached."""

from __future__ import annotations

from typing import Optional

from .rbtree import RBNode, RBTree


class CachedRBTree(RBTree):
    """An :class:`RBTree` whose leftmost node is found in constant time.

    Only the leftmost node is cached; callers that insert a node must say
    whether it became the new leftmost one.
    """

    __slots__ = ("leftmost",)

    def __init__(self) -> None:
        super().__init__()
        self.leftmost: Optional[RBNode] = None

    def first(self) -> Optional[RBNode]:
        """Return the cached leftmost node, or None for an empty tree."""
        return self.leftmost

    def insert_color(self, node: RBNode, leftmost: bool = False) -> None:
        """Rebalance after linking ``node``, updating the cache if it is leftmost."""
        if leftmost:
            self.leftmost = node
        super().insert_color(node)

    def replace(self, victim: RBNode, new: RBNode) -> None:
        """Put ``new`` in the place of ``victim``, keeping the cache valid."""
        super().replace(victim, new)
        if self.leftmost is victim:
            self.leftmost = new

    def erase(self, node: RBNode) -> None:
        """Remove ``node`` from the tree, keeping the cache valid."""
        if node is self.leftmost:
            self.leftmost = node.next()
        super().erase(node)