"""Binary sort (search) trees of table elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from algokit.table import Element

__all__ = ["BSTNode", "BinarySortTree"]


@dataclass(eq=False)
class BSTNode:
    """A tree node holding one element and its two subtrees."""

    element: Element
    left: BSTNode | None = None
    right: BSTNode | None = None

    @property
    def key(self) -> int:
        return self.element.key


class BinarySortTree:
    """Elements ordered by key; keys are unique."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self.root: BSTNode | None = None
        self._count = 0
        for element in elements:
            self.insert(element)

    def insert(self, element: Element) -> bool:
        """Insert ``element``; return False if its key is already present."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None:
            if element.key == node.key:
                return False
            parent = node
            node = node.left if element.key < node.key else node.right
        fresh = BSTNode(element)
        if parent is None:
            self.root = fresh
        elif element.key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._count += 1
        return True

    def _find(self, key: int) -> BSTNode | None:
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def search(self, key: int) -> Element | None:
        """The element with ``key``, or None."""
        node = self._find(key)
        return node.element if node is not None else None

    @staticmethod
    def _remove_node(node: BSTNode) -> BSTNode | None:
        """Unlink ``node``; return the subtree that takes its place."""
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right
        # Replace by the in-order predecessor: left once, then right to the end.
        parent = node
        pred = node.left
        while pred.right is not None:
            parent = pred
            pred = pred.right
        node.element = pred.element
        if parent is node:
            parent.left = pred.left
        else:
            parent.right = pred.left
        return node

    def delete(self, key: int) -> bool:
        """Remove the element with ``key``; return False if there is none."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False
        replacement = self._remove_node(node)
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._count -= 1
        return True

    def inorder(self) -> Iterator[Element]:
        """Yield elements in ascending key order."""

        def walk(node: BSTNode | None) -> Iterator[Element]:
            if node is not None:
                yield from walk(node.left)
                yield node.element
                yield from walk(node.right)

        return walk(self.root)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def __len__(self) -> int:
        return self._count