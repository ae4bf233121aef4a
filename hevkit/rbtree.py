"""Intrusive red-black tree.

The tree does not compare keys itself: callers find the insertion point,
attach the node with :meth:`RBTree.link` and then rebalance with
:meth:`RBTree.insert_color`.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

_RED = False
_BLACK = True


class RBNode:
    """A node of an :class:`RBTree`, optionally carrying a value."""

    __slots__ = ("parent", "left", "right", "black", "value")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.left: Optional[RBNode] = None
        self.right: Optional[RBNode] = None
        self.black = _RED
        self.parent: Optional[RBNode] = self

    def __repr__(self) -> str:
        colour = "black" if self.black else "red"
        return f"RBNode({self.value!r}, {colour})"

    def is_empty(self) -> bool:
        """Return True if the node is not linked into any tree."""
        return self.parent is self

    def clear(self) -> None:
        """Mark the node as not belonging to a tree."""
        self.parent = self

    def next(self) -> Optional[RBNode]:
        """Return the in-order successor, or None."""
        if self.is_empty():
            return None
        node = self
        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            return node
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = node.parent
        return parent

    def prev(self) -> Optional[RBNode]:
        """Return the in-order predecessor, or None."""
        if self.is_empty():
            return None
        node = self
        if node.left is not None:
            node = node.left
            while node.right is not None:
                node = node.right
            return node
        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = node.parent
        return parent


class RBTree:
    """Red-black tree of :class:`RBNode` objects."""

    __slots__ = ("root",)

    def __init__(self) -> None:
        self.root: Optional[RBNode] = None

    def __iter__(self) -> Iterator[RBNode]:
        node = self.first()
        while node is not None:
            yield node
            node = node.next()

    def link(self, node: RBNode, parent: Optional[RBNode], left: bool) -> None:
        """Attach ``node`` as a red leaf below ``parent``.

        With no parent the node becomes the root; otherwise it becomes the
        left or the right child of ``parent``.
        """
        node.parent = parent
        node.black = _RED
        node.left = node.right = None
        if parent is None:
            self.root = node
        elif left:
            parent.left = node
        else:
            parent.right = node

    def first(self) -> Optional[RBNode]:
        """Return the leftmost node, or None for an empty tree."""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def last(self) -> Optional[RBNode]:
        """Return the rightmost node, or None for an empty tree."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def _change_child(
        self, old: RBNode, new: Optional[RBNode], parent: Optional[RBNode]
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_set_parents(self, old: RBNode, new: RBNode, black: bool) -> None:
        parent = old.parent
        new.parent = old.parent
        new.black = old.black
        old.parent = new
        old.black = black
        self._change_child(old, new, parent)

    def insert_color(self, node: RBNode) -> None:
        """Rebalance the tree after ``node`` has been linked in."""
        parent = node.parent
        while True:
            if parent is None:
                node.parent = None
                node.black = _BLACK
                return
            if parent.black:
                return

            gparent = parent.parent
            tmp = gparent.right
            if parent is not tmp:
                if tmp is not None and not tmp.black:
                    tmp.parent, tmp.black = gparent, _BLACK
                    parent.parent, parent.black = gparent, _BLACK
                    node = gparent
                    parent = node.parent
                    node.black = _RED
                    continue
                tmp = parent.right
                if node is tmp:
                    tmp = node.left
                    parent.right = tmp
                    node.left = parent
                    if tmp is not None:
                        tmp.parent, tmp.black = parent, _BLACK
                    parent.parent, parent.black = node, _RED
                    parent = node
                    tmp = node.right
                gparent.left = tmp
                parent.right = gparent
                if tmp is not None:
                    tmp.parent, tmp.black = gparent, _BLACK
                self._rotate_set_parents(gparent, parent, _RED)
                return
            else:
                tmp = gparent.left
                if tmp is not None and not tmp.black:
                    tmp.parent, tmp.black = gparent, _BLACK
                    parent.parent, parent.black = gparent, _BLACK
                    node = gparent
                    parent = node.parent
                    node.black = _RED
                    continue
                tmp = parent.left
                if node is tmp:
                    tmp = node.right
                    parent.left = tmp
                    node.right = parent
                    if tmp is not None:
                        tmp.parent, tmp.black = parent, _BLACK
                    parent.parent, parent.black = node, _RED
                    parent = node
                    tmp = node.left
                gparent.right = tmp
                parent.left = gparent
                if tmp is not None:
                    tmp.parent, tmp.black = gparent, _BLACK
                self._rotate_set_parents(gparent, parent, _RED)
                return

    def replace(self, victim: RBNode, new: RBNode) -> None:
        """Put ``new`` in the place of ``victim`` without rebalancing."""
        parent = victim.parent
        new.parent = victim.parent
        new.black = victim.black
        new.left = victim.left
        new.right = victim.right
        if victim.left is not None:
            victim.left.parent = new
        if victim.right is not None:
            victim.right.parent = new
        self._change_child(victim, new, parent)

    def erase(self, node: RBNode) -> None:
        """Remove ``node`` from the tree and rebalance."""
        rebalance = self._erase(node)
        if rebalance is not None:
            self._erase_color(rebalance)

    def _erase(self, node: RBNode) -> Optional[RBNode]:
        child = node.right
        tmp = node.left

        if tmp is None:
            parent = node.parent
            black = node.black
            self._change_child(node, child, parent)
            if child is not None:
                child.parent = parent
                child.black = black
                return None
            return parent if black else None

        if child is None:
            parent = node.parent
            tmp.parent = parent
            tmp.black = node.black
            self._change_child(node, tmp, parent)
            return None

        successor = child
        tmp = child.left
        if tmp is None:
            parent = successor
            child2 = successor.right
        else:
            while tmp is not None:
                parent = successor
                successor = tmp
                tmp = tmp.left
            child2 = successor.right
            parent.left = child2
            successor.right = child
            child.parent = successor

        tmp = node.left
        successor.left = tmp
        tmp.parent = successor

        self._change_child(node, successor, node.parent)

        if child2 is not None:
            child2.parent = parent
            child2.black = _BLACK
            rebalance = None
        else:
            rebalance = parent if successor.black else None
        successor.parent = node.parent
        successor.black = node.black
        return rebalance

    def _erase_color(self, parent: RBNode) -> None:
        node: Optional[RBNode] = None
        while True:
            sibling = parent.right
            if node is not sibling:
                if not sibling.black:
                    tmp1 = sibling.left
                    parent.right = tmp1
                    sibling.left = parent
                    tmp1.parent, tmp1.black = parent, _BLACK
                    self._rotate_set_parents(parent, sibling, _RED)
                    sibling = tmp1
                tmp1 = sibling.right
                if tmp1 is None or tmp1.black:
                    tmp2 = sibling.left
                    if tmp2 is None or tmp2.black:
                        sibling.parent, sibling.black = parent, _RED
                        if not parent.black:
                            parent.black = _BLACK
                        else:
                            node = parent
                            parent = node.parent
                            if parent is not None:
                                continue
                        return
                    tmp1 = tmp2.right
                    sibling.left = tmp1
                    tmp2.right = sibling
                    parent.right = tmp2
                    if tmp1 is not None:
                        tmp1.parent, tmp1.black = sibling, _BLACK
                    tmp1 = sibling
                    sibling = tmp2
                tmp2 = sibling.left
                parent.right = tmp2
                sibling.left = parent
                tmp1.parent, tmp1.black = sibling, _BLACK
                if tmp2 is not None:
                    tmp2.parent = parent
                self._rotate_set_parents(parent, sibling, _BLACK)
                return
            else:
                sibling = parent.left
                if not sibling.black:
                    tmp1 = sibling.right
                    parent.left = tmp1
                    sibling.right = parent
                    tmp1.parent, tmp1.black = parent, _BLACK
                    self._rotate_set_parents(parent, sibling, _RED)
                    sibling = tmp1
                tmp1 = sibling.left
                if tmp1 is None or tmp1.black:
                    tmp2 = sibling.right
                    if tmp2 is None or tmp2.black:
                        sibling.parent, sibling.black = parent, _RED
                        if not parent.black:
                            parent.black = _BLACK
                        else:
                            node = parent
                            parent = node.parent
                            if parent is not None:
                                continue
                        return
                    tmp1 = tmp2.left
                    sibling.right = tmp1
                    tmp2.left = sibling
                    parent.left = tmp2
                    if tmp1 is not None:
                        tmp1.parent, tmp1.black = sibling, _BLACK
                    tmp1 = sibling
                    sibling = tmp2
                tmp2 = sibling.right
                parent.left = tmp2
                sibling.right = parent
                tmp1.parent, tmp1.black = sibling, _BLACK
                if tmp2 is not None:
                    tmp2.parent = parent
                self._rotate_set_parents(parent, sibling, _BLACK)
                return