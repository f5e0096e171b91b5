import random

import pytest

from algokit.btree import BTree, BTreeNode


def check_invariants(tree: BTree) -> None:
    keys = list(tree.inorder())
    assert keys == sorted(set(keys))
    assert len(keys) == len(tree)
    if tree.root is None:
        assert not keys
        return
    assert tree.root.parent is None
    leaf_depths = set()

    def walk(node: BTreeNode, depth: int, low, high) -> None:
        assert node.keys == sorted(node.keys)
        assert len(node.keys) <= tree.order - 1
        if node is tree.root:
            assert len(node.keys) >= 1
        else:
            assert len(node.keys) >= tree.min_keys
        for k in node.keys:
            assert (low is None or k > low) and (high is None or k < high)
        if node.children:
            assert len(node.children) == len(node.keys) + 1
            bounds = [low, *node.keys, high]
            for n, child in enumerate(node.children):
                assert child.parent is node
                walk(child, depth + 1, bounds[n], bounds[n + 1])
        else:
            leaf_depths.add(depth)

    walk(tree.root, 0, None, None)
    assert len(leaf_depths) == 1


def test_three_keys_split_root():
    tree = BTree([1, 2, 3])
    assert tree.levels() == [[(2,)], [(1,), (3,)]]


def test_empty_tree():
    tree = BTree()
    assert list(tree.inorder()) == []
    assert tree.levels() == []
    assert tree.render_levels() == ""
    result = tree.search(5)
    assert result.node is None and not result.found
    assert tree.delete(5) is False


def test_search_found_and_missing():
    tree = BTree([1, 2, 3])
    hit = tree.search(2)
    assert hit.found and hit.node is tree.root
    assert hit.node.keys[hit.index - 1] == 2
    miss = tree.search(4)
    assert not miss.found
    assert miss.node.is_leaf
    assert miss.node.keys[: miss.index] == [3]


def test_duplicate_insert_returns_false():
    tree = BTree([5, 1, 9])
    assert tree.insert(5) is False
    assert len(tree) == 3


def test_duplicate_in_constructor_raises():
    with pytest.raises(ValueError):
        BTree([4, 7, 4])


def test_order_too_small_raises():
    with pytest.raises(ValueError):
        BTree([1], order=2)


@pytest.mark.parametrize("order", [3, 4, 5, 7])
def test_inserts_keep_invariants(order):
    rng = random.Random(order)
    keys = rng.sample(range(1000), 200)
    tree = BTree(order=order)
    for key in keys:
        assert tree.insert(key)
        check_invariants(tree)
    assert list(tree.inorder()) == sorted(keys)
    assert all(k in tree for k in keys)
    assert 1000 not in tree


@pytest.mark.parametrize("order", [3, 4, 5, 6])
def test_deletes_keep_invariants(order):
    rng = random.Random(100 + order)
    keys = rng.sample(range(500), 120)
    tree = BTree(keys, order=order)
    remaining = set(keys)
    for key in rng.sample(keys, len(keys)):
        assert tree.delete(key)
        remaining.discard(key)
        check_invariants(tree)
        assert key not in tree
        assert list(tree.inorder()) == sorted(remaining)
    assert tree.root is None
    assert len(tree) == 0


def test_delete_missing_key():
    tree = BTree(range(1, 20))
    assert tree.delete(100) is False
    assert len(tree) == 19
    check_invariants(tree)


def test_delete_internal_key():
    tree = BTree(range(1, 16))
    root_key = tree.root.keys[0]
    assert tree.delete(root_key)
    assert root_key not in tree
    assert list(tree.inorder()) == [k for k in range(1, 16) if k != root_key]
    check_invariants(tree)


def test_reinsert_after_delete():
    tree = BTree(range(30), order=4)
    for k in range(0, 30, 2):
        tree.delete(k)
    for k in range(0, 30, 2):
        assert tree.insert(k)
    assert list(tree.inorder()) == list(range(30))
    check_invariants(tree)


def test_levels_cover_all_keys():
    tree = BTree(range(50), order=5)
    flat = sorted(k for level in tree.levels() for node in level for k in node)
    assert flat == list(range(50))