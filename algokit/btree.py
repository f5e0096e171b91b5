"""B-trees of integer keys."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator

__all__ = ["BTreeNode", "SearchResult", "BTree"]

DEFAULT_ORDER = 3


@dataclass(eq=False)
class BTreeNode:
    """A node with its sorted keys and, unless it is a leaf, one more child than keys."""

    keys: list[int] = field(default_factory=list)
    children: list[BTreeNode] = field(default_factory=list)
    parent: BTreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class SearchResult:
    """Where a search ended.

    ``index`` counts the keys of ``node`` that are not greater than the key
    searched for. When ``found`` is true the key is ``node.keys[index - 1]``;
    otherwise the key belongs between positions ``index`` and ``index + 1``
    (1-based) of the leaf ``node``, which is None for an empty tree.
    """

    node: BTreeNode | None
    index: int
    found: bool


class BTree:
    """A B-tree of order ``order``: each node holds at most ``order - 1`` keys."""

    def __init__(self, keys: Iterable[int] = (), order: int = DEFAULT_ORDER) -> None:
        if order < 3:
            raise ValueError("a B-tree needs an order of at least 3")
        self.order = order
        self.root: BTreeNode | None = None
        self._count = 0
        for key in keys:
            if not self.insert(key):
                raise ValueError(f"duplicate key {key}")

    @property
    def _split_point(self) -> int:
        return (self.order + 1) // 2

    @property
    def min_keys(self) -> int:
        """Fewest keys a node other than the root may hold."""
        return self._split_point - 1

    def search(self, key: int) -> SearchResult:
        node = self.root
        last: BTreeNode | None = None
        index = 0
        while node is not None:
            index = bisect_right(node.keys, key)
            if index > 0 and node.keys[index - 1] == key:
                return SearchResult(node, index, True)
            last = node
            node = node.children[index] if node.children else None
        return SearchResult(last, index, False)

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it is already present."""
        result = self.search(key)
        if result.found:
            return False
        node = result.node
        index = result.index
        carried = key
        right: BTreeNode | None = None
        while node is not None:
            node.keys.insert(index, carried)
            if right is not None:
                node.children.insert(index + 1, right)
                right.parent = node
            if len(node.keys) < self.order:
                break
            carried, right = self._split(node)
            node = node.parent
            if node is not None:
                index = bisect_right(node.keys, carried)
        else:
            root = BTreeNode([carried], parent=None)
            if self.root is not None:
                root.children = [self.root, right] if right is not None else [self.root]
                for child in root.children:
                    child.parent = root
            self.root = root
        self._count += 1
        return True

    def _split(self, node: BTreeNode) -> tuple[int, BTreeNode]:
        s = self._split_point
        middle = node.keys[s - 1]
        right = BTreeNode(node.keys[s:], node.children[s:], node.parent)
        for child in right.children:
            child.parent = right
        node.keys = node.keys[: s - 1]
        node.children = node.children[:s]
        return middle, right

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it is not present."""
        result = self.search(key)
        if not result.found:
            return False
        node = result.node
        assert node is not None
        index = result.index - 1
        if node.children:
            leaf = node.children[index + 1]
            while leaf.children:
                leaf = leaf.children[0]
            node.keys[index] = leaf.keys[0]
            node, index = leaf, 0
        del node.keys[index]
        self._rebalance(node)
        self._count -= 1
        return True

    def _rebalance(self, node: BTreeNode) -> None:
        parent = node.parent
        if parent is None:
            if not node.keys:
                self.root = node.children[0] if node.children else None
                if self.root is not None:
                    self.root.parent = None
            return
        if len(node.keys) >= self.min_keys:
            return
        j = next(n for n, child in enumerate(parent.children) if child is node)
        right = parent.children[j + 1] if j < len(parent.keys) else None
        left = parent.children[j - 1] if j > 0 else None
        if right is not None and len(right.keys) > self.min_keys:
            node.keys.append(parent.keys[j])
            parent.keys[j] = right.keys.pop(0)
            if right.children:
                moved = right.children.pop(0)
                node.children.append(moved)
                moved.parent = node
        elif left is not None and len(left.keys) > self.min_keys:
            node.keys.insert(0, parent.keys[j - 1])
            parent.keys[j - 1] = left.keys.pop()
            if left.children:
                moved = left.children.pop()
                node.children.insert(0, moved)
                moved.parent = node
        elif right is not None:
            self._merge(parent, j)
            self._rebalance(parent)
        else:
            self._merge(parent, j - 1)
            self._rebalance(parent)

    @staticmethod
    def _merge(parent: BTreeNode, j: int) -> None:
        """Merge child ``j + 1`` and the separating key into child ``j``."""
        target = parent.children[j]
        source = parent.children.pop(j + 1)
        target.keys.append(parent.keys.pop(j))
        target.keys.extend(source.keys)
        for child in source.children:
            child.parent = target
        target.children.extend(source.children)

    def inorder(self) -> Iterator[int]:
        """Yield keys in ascending order."""

        def walk(node: BTreeNode) -> Iterator[int]:
            for n, key in enumerate(node.keys):
                if node.children:
                    yield from walk(node.children[n])
                yield key
            if node.children:
                yield from walk(node.children[-1])

        if self.root is not None:
            yield from walk(self.root)

    def levels(self) -> list[list[tuple[int, ...]]]:
        """The keys of each node, level by level from the root."""
        result: list[list[tuple[int, ...]]] = []
        level = deque([self.root] if self.root is not None else [])
        while level:
            result.append([tuple(node.keys) for node in level])
            level = deque(child for node in level for child in node.children)
        return result

    def render_levels(self) -> str:
        lines = []
        for number, nodes in enumerate(self.levels(), start=1):
            groups = "".join(
                "(" + "".join(f" {k:2d}" for k in keys) + ") " for keys in nodes
            )
            lines.append(f"  level {number:2d}: {groups}\n")
        return "".join(lines)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key).found

    def __len__(self) -> int:
        return self._count