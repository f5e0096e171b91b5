"""Balanced (AVL) binary sort trees of table elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from algokit.table import Element

__all__ = ["AVLNode", "AVLTree", "LH", "EH", "RH"]

LH = 1  # left subtree higher
EH = 0  # equal heights
RH = -1  # right subtree higher


@dataclass(eq=False)
class AVLNode:
    """A tree node with its balance factor (left height minus right height)."""

    element: Element
    balance: int = EH
    left: AVLNode | None = None
    right: AVLNode | None = None

    @property
    def key(self) -> int:
        return self.element.key


def _rotate_right(node: AVLNode) -> AVLNode:
    lc = node.left
    assert lc is not None
    node.left = lc.right
    lc.right = node
    return lc


def _rotate_left(node: AVLNode) -> AVLNode:
    rc = node.right
    assert rc is not None
    node.right = rc.left
    rc.left = node
    return rc


def _left_balance(node: AVLNode) -> AVLNode:
    """Restore balance when the left subtree is two levels higher."""
    lc = node.left
    assert lc is not None
    if lc.balance == LH:
        node.balance = lc.balance = EH
        return _rotate_right(node)
    if lc.balance == EH:  # only arises on deletion
        node.balance, lc.balance = LH, RH
        return _rotate_right(node)
    rd = lc.right
    assert rd is not None
    if rd.balance == LH:
        node.balance, lc.balance = RH, EH
    elif rd.balance == EH:
        node.balance = lc.balance = EH
    else:
        node.balance, lc.balance = EH, LH
    rd.balance = EH
    node.left = _rotate_left(lc)
    return _rotate_right(node)


def _right_balance(node: AVLNode) -> AVLNode:
    """Restore balance when the right subtree is two levels higher."""
    rc = node.right
    assert rc is not None
    if rc.balance == RH:
        node.balance = rc.balance = EH
        return _rotate_left(node)
    if rc.balance == EH:  # only arises on deletion
        node.balance, rc.balance = RH, LH
        return _rotate_left(node)
    ld = rc.left
    assert ld is not None
    if ld.balance == LH:
        node.balance, rc.balance = EH, RH
    elif ld.balance == EH:
        node.balance = rc.balance = EH
    else:
        node.balance, rc.balance = LH, EH
    ld.balance = EH
    node.right = _rotate_right(rc)
    return _rotate_left(node)


def _depth(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return max(_depth(node.left), _depth(node.right)) + 1


class AVLTree:
    """A binary sort tree kept height-balanced; keys are unique."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self.root: AVLNode | None = None
        self._count = 0
        for element in elements:
            self.insert(element)

    def _insert(
        self, node: AVLNode | None, element: Element
    ) -> tuple[AVLNode, bool, bool]:
        """Return (new subtree, grew taller, inserted)."""
        if node is None:
            return AVLNode(element), True, True
        if element.key == node.key:
            return node, False, False
        if element.key < node.key:
            node.left, taller, inserted = self._insert(node.left, element)
            if taller:
                if node.balance == LH:
                    return _left_balance(node), False, inserted
                if node.balance == EH:
                    node.balance = LH
                    return node, True, inserted
                node.balance = EH
            return node, False, inserted
        node.right, taller, inserted = self._insert(node.right, element)
        if taller:
            if node.balance == RH:
                return _right_balance(node), False, inserted
            if node.balance == EH:
                node.balance = RH
                return node, True, inserted
            node.balance = EH
        return node, False, inserted

    def insert(self, element: Element) -> bool:
        """Insert ``element``; return False if its key is already present."""
        self.root, _, inserted = self._insert(self.root, element)
        if inserted:
            self._count += 1
        return inserted

    @staticmethod
    def _left_shrunk(node: AVLNode) -> tuple[AVLNode, bool]:
        if node.balance == LH:
            node.balance = EH
            return node, True
        if node.balance == EH:
            node.balance = RH
            return node, False
        assert node.right is not None
        still_shorter = node.right.balance != EH
        return _right_balance(node), still_shorter

    @staticmethod
    def _right_shrunk(node: AVLNode) -> tuple[AVLNode, bool]:
        if node.balance == RH:
            node.balance = EH
            return node, True
        if node.balance == EH:
            node.balance = LH
            return node, False
        assert node.left is not None
        still_shorter = node.left.balance != EH
        return _left_balance(node), still_shorter

    def _delete(
        self, node: AVLNode | None, key: int
    ) -> tuple[AVLNode | None, bool, bool]:
        """Return (new subtree, grew shorter, deleted)."""
        if node is None:
            return None, False, False
        if key < node.key:
            node.left, shorter, deleted = self._delete(node.left, key)
            if shorter:
                new, shorter = self._left_shrunk(node)
                return new, shorter, deleted
            return node, False, deleted
        if key > node.key:
            node.right, shorter, deleted = self._delete(node.right, key)
            if shorter:
                new, shorter = self._right_shrunk(node)
                return new, shorter, deleted
            return node, False, deleted
        if node.left is None:
            return node.right, True, True
        if node.right is None:
            return node.left, True, True
        # Both subtrees present: take the in-order predecessor's element.
        pred = node.left
        while pred.right is not None:
            pred = pred.right
        node.element = pred.element
        node.left, shorter, _ = self._delete(node.left, pred.key)
        if shorter:
            new, shorter = self._left_shrunk(node)
            return new, shorter, True
        return node, False, True

    def delete(self, key: int) -> bool:
        """Remove the element with ``key``; return False if there is none."""
        self.root, _, deleted = self._delete(self.root, key)
        if deleted:
            self._count -= 1
        return deleted

    def search(self, key: int) -> Element | None:
        """The element with ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node.element if node is not None else None

    def inorder(self) -> Iterator[Element]:
        """Yield elements in ascending key order."""

        def walk(node: AVLNode | None) -> Iterator[Element]:
            if node is not None:
                yield from walk(node.left)
                yield node.element
                yield from walk(node.right)

        return walk(self.root)

    def depth(self) -> int:
        return _depth(self.root)

    def render(self) -> str:
        """Draw the tree level by level, each key in a two-character column."""
        rows = self.depth()
        if not rows:
            return ""
        columns = 2**rows - 1
        grid: list[dict[int, int]] = [{} for _ in range(rows)]
        level: list[tuple[AVLNode, int]] = [(self.root, 2 ** (rows - 1))]
        for i in range(rows):
            following: list[tuple[AVLNode, int]] = []
            offset = 2 ** (rows - i - 2) if i < rows - 1 else 0
            for node, position in level:
                grid[i][position] = node.key
                if node.left is not None:
                    following.append((node.left, position - offset))
                if node.right is not None:
                    following.append((node.right, position + offset))
            level = following
        lines = [
            "".join(
                f"{row[c]:2d}" if c in row else "  " for c in range(1, columns + 1)
            )
            for row in grid
        ]
        return "\n".join(lines) + "\n"

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return self._count