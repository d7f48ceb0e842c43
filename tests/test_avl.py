import operator
import random

from containerlib.avl import (
    AvlNode,
    copy_tree,
    find_node,
    first_node,
    insert_node,
    last_node,
    node_height,
    predecessor,
    remove_node,
    successor,
)

LESS = operator.lt


def _check(node, parent=None):
    """Check links, heights and balance; return the subtree's height."""
    if node is None:
        return 0
    assert node.parent is parent
    left = _check(node.left, node)
    right = _check(node.right, node)
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    return node.height


def _in_order(root):
    keys = []
    node = first_node(root)
    while node is not None:
        keys.append(node.key)
        node = successor(node)
    return keys


def _build(keys, less=LESS):
    root = None
    for key in keys:
        root, _, _ = insert_node(root, key, str(key), less)
    return root


def test_empty_height_is_zero():
    assert node_height(None) == 0
    assert node_height(AvlNode(1, "a")) == 1


def test_ascending_inserts_rotate():
    root = _build([1, 2, 3])
    assert root.key == 2
    assert root.left.key == 1
    assert root.right.key == 3
    _check(root)


def test_random_inserts_keep_order_and_balance():
    rng = random.Random(7)
    keys = rng.sample(range(10000), 1500)
    root = _build(keys)
    _check(root)
    assert _in_order(root) == sorted(keys)


def test_duplicate_insert_keeps_existing_node():
    root = _build([5, 3, 8])
    existing = find_node(root, 3, LESS)
    root, node, inserted = insert_node(root, 3, "other", LESS)
    assert inserted is False
    assert node is existing
    assert node.value == "3"


def test_find_node():
    root = _build(range(50))
    assert find_node(root, 17, LESS).value == "17"
    assert find_node(root, 99, LESS) is None
    assert find_node(None, 1, LESS) is None


def test_remove_missing_key_returns_none():
    root = _build(range(10))
    new_root, removed = remove_node(root, 42, LESS)
    assert removed is None
    assert new_root is root
    assert _in_order(new_root) == list(range(10))


def test_remove_all_in_random_order():
    rng = random.Random(11)
    keys = list(range(800))
    root = _build(keys)
    order = keys[:]
    rng.shuffle(order)
    remaining = set(keys)
    for key in order:
        root, removed = remove_node(root, key, LESS)
        assert removed.key == key
        remaining.discard(key)
        _check(root)
        assert _in_order(root) == sorted(remaining)
    assert root is None


def test_remove_keeps_other_nodes_identity():
    root = _build(range(64))
    before = {key: find_node(root, key, LESS) for key in range(64)}
    root, removed = remove_node(root, root.key, LESS)
    assert removed.parent is None and removed.left is None and removed.right is None
    for key, node in before.items():
        if node is not removed:
            assert find_node(root, key, LESS) is node
    _check(root)


def test_neighbour_walks():
    root = _build([4, 2, 6, 1, 3, 5, 7])
    assert predecessor(first_node(root)) is None
    assert successor(last_node(root)) is None
    keys = []
    node = last_node(root)
    while node is not None:
        keys.append(node.key)
        node = predecessor(node)
    assert keys == [7, 6, 5, 4, 3, 2, 1]


def test_first_and_last_of_empty_tree():
    assert first_node(None) is None
    assert last_node(None) is None


def test_copy_tree_is_independent():
    root = _build(range(30))
    clone = copy_tree(root)
    _check(clone)
    assert _in_order(clone) == _in_order(root)
    assert clone.height == root.height
    find_node(clone, 5, LESS).value = "changed"
    assert find_node(root, 5, LESS).value == "5"
    clone, _ = remove_node(clone, 10, LESS)
    assert find_node(root, 10, LESS) is not None and find_node(clone, 10, LESS) is None


def test_custom_ordering():
    root = _build(range(20), less=operator.gt)
    _check(root)
    assert _in_order(root) == list(range(19, -1, -1))