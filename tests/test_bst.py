import random

import pytest

from algokit.bst import (
    avl_insert,
    bst_delete,
    bst_from_preorder,
    bst_insert,
    bst_search,
    inorder_predecessor,
)
from algokit.trees import Node, count_nodes, inorder, preorder

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def build(keys):
    root = None
    for key in keys:
        root = bst_insert(root, key)
    return root


def checked_height(node):
    """Height of ``node``; asserts AVL balance and stored heights on the way."""
    if node is None:
        return 0
    left = checked_height(node.left)
    right = checked_height(node.right)
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    return node.height


def test_insert_keeps_inorder_sorted():
    assert inorder(build(KEYS)) == sorted(KEYS)


def test_insert_keeps_duplicates():
    keys = [5, 3, 5, 7, 3]
    assert inorder(build(keys)) == sorted(keys)


def test_search():
    root = build(KEYS)
    assert all(bst_search(root, key) for key in KEYS)
    assert not any(bst_search(root, key + 1) for key in KEYS)
    assert not bst_search(None, 1)


@pytest.mark.parametrize("key", KEYS)
def test_delete_each_key(key):
    root = bst_delete(build(KEYS), key)
    expected = sorted(KEYS)
    expected.remove(key)
    assert inorder(root) == expected
    assert not bst_search(root, key)


def test_delete_missing_key_changes_nothing():
    root = bst_delete(build(KEYS), 999)
    assert inorder(root) == sorted(KEYS)


def test_delete_only_node():
    assert bst_delete(Node(4), 4) is None
    assert bst_delete(None, 4) is None


def test_delete_random_sequence():
    rng = random.Random(7)
    keys = rng.sample(range(1000), 60)
    root = build(keys)
    remaining = sorted(keys)
    for key in rng.sample(keys, 30):
        root = bst_delete(root, key)
        remaining.remove(key)
        assert inorder(root) == remaining


def test_inorder_predecessor_is_left_maximum():
    root = build(KEYS)
    assert inorder_predecessor(root).data == max(inorder(root.left))


def test_inorder_predecessor_without_left_subtree():
    with pytest.raises(ValueError):
        inorder_predecessor(Node(1))


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_from_preorder_round_trip(seed):
    keys = random.Random(seed).sample(range(500), 40)
    sequence = preorder(build(keys))
    rebuilt = bst_from_preorder(sequence)
    assert preorder(rebuilt) == sequence
    assert inorder(rebuilt) == sorted(keys)


def test_from_preorder_with_duplicates():
    sequence = preorder(build([5, 3, 5, 7, 3, 7]))
    assert preorder(bst_from_preorder(sequence)) == sequence


def test_from_preorder_empty():
    with pytest.raises(ValueError):
        bst_from_preorder([])


@pytest.mark.parametrize("keys", [[3, 2, 1], [1, 2, 3], [3, 1, 2], [1, 3, 2]])
def test_avl_single_and_double_rotations(keys):
    root = None
    for key in keys:
        root = avl_insert(root, key)
    assert root.data == 2
    assert checked_height(root) == 2


def test_avl_sorted_insertions_stay_balanced():
    keys = list(range(1, 101))
    root = None
    for key in keys:
        root = avl_insert(root, key)
    assert inorder(root) == keys
    assert checked_height(root) <= 8


def test_avl_random_insertions_ignore_duplicates():
    rng = random.Random(11)
    keys = [rng.randrange(200) for _ in range(300)]
    root = None
    for key in keys:
        root = avl_insert(root, key)
    assert inorder(root) == sorted(set(keys))
    assert count_nodes(root) == len(set(keys))
    checked_height(root)
    assert all(bst_search(root, key) for key in keys)