"""Height-balanced binary search tree nodes and the operations on them.

Every node keeps a link to its parent so that in-order neighbours can be
found from a node alone. Operations that may change the shape of a tree
return the new root.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

Less = Callable[[Any, Any], bool]


class AvlNode:
    """One entry of the tree: a key, its value and the links around it."""

    __slots__ = ("key", "value", "left", "right", "parent", "height")

    def __init__(self, key: Any, value: Any, parent: Optional[AvlNode] = None) -> None:
        self.key = key
        self.value = value
        self.left: Optional[AvlNode] = None
        self.right: Optional[AvlNode] = None
        self.parent = parent
        self.height = 1

    def __repr__(self) -> str:
        return f"AvlNode({self.key!r}, {self.value!r})"


def node_height(node: Optional[AvlNode]) -> int:
    """Height of a subtree; an empty subtree has height 0."""
    return 0 if node is None else node.height


def _update_height(node: AvlNode) -> None:
    node.height = max(node_height(node.left), node_height(node.right)) + 1


def _rotate_right(top: AvlNode) -> AvlNode:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    if top.left is not None:
        top.left.parent = top
    pivot.parent = top.parent
    pivot.right = top
    top.parent = pivot
    _update_height(top)
    _update_height(pivot)
    return pivot


def _rotate_left(top: AvlNode) -> AvlNode:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    if top.right is not None:
        top.right.parent = top
    pivot.parent = top.parent
    pivot.left = top
    top.parent = pivot
    _update_height(top)
    _update_height(pivot)
    return pivot


def _rebalance(node: AvlNode) -> AvlNode:
    """Restore balance at ``node`` and return the subtree's new root."""
    balance = node_height(node.left) - node_height(node.right)
    if balance > 1:
        left = node.left
        if node_height(left.right) > node_height(left.left):
            node.left = _rotate_left(left)
        return _rotate_right(node)
    if balance < -1:
        right = node.right
        if node_height(right.left) > node_height(right.right):
            node.right = _rotate_right(right)
        return _rotate_left(node)
    _update_height(node)
    return node


def find_node(root: Optional[AvlNode], key: Any, less: Less) -> Optional[AvlNode]:
    """Return the node whose key is equivalent to ``key``, or None."""
    node = root
    while node is not None:
        if less(node.key, key):
            node = node.right
        elif less(key, node.key):
            node = node.left
        else:
            return node
    return None


def _insert(node, parent, key, value, less):
    if node is None:
        created = AvlNode(key, value, parent)
        return created, created, True
    if less(key, node.key):
        node.left, target, inserted = _insert(node.left, node, key, value, less)
    elif less(node.key, key):
        node.right, target, inserted = _insert(node.right, node, key, value, less)
    else:
        return node, node, False
    if not inserted:
        return node, target, False
    return _rebalance(node), target, True


def insert_node(
    root: Optional[AvlNode], key: Any, value: Any, less: Less
) -> tuple[AvlNode, AvlNode, bool]:
    """Insert ``key`` unless an equivalent key is present.

    Returns the new root, the node holding the key and whether a node was
    created. An existing node keeps its value.
    """
    return _insert(root, None, key, value, less)


def _pop_max(node: AvlNode) -> tuple[Optional[AvlNode], AvlNode]:
    """Detach the largest node of a subtree; return (new subtree, that node)."""
    if node.right is None:
        if node.left is not None:
            node.left.parent = node.parent
        return node.left, node
    node.right, largest = _pop_max(node.right)
    return _rebalance(node), largest


def _unlink(node: AvlNode) -> Optional[AvlNode]:
    """Take ``node`` out of its subtree and return what replaces it."""
    if node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        replacement = child
    else:
        remaining_left, predecessor_node = _pop_max(node.left)
        predecessor_node.left = remaining_left
        if remaining_left is not None:
            remaining_left.parent = predecessor_node
        predecessor_node.right = node.right
        node.right.parent = predecessor_node
        predecessor_node.parent = node.parent
        replacement = _rebalance(predecessor_node)
    node.left = node.right = node.parent = None
    return replacement


def _remove(node, key, less):
    if node is None:
        return None, None
    if less(key, node.key):
        node.left, removed = _remove(node.left, key, less)
    elif less(node.key, key):
        node.right, removed = _remove(node.right, key, less)
    else:
        return _unlink(node), node
    if removed is None:
        return node, None
    return _rebalance(node), removed


def remove_node(
    root: Optional[AvlNode], key: Any, less: Less
) -> tuple[Optional[AvlNode], Optional[AvlNode]]:
    """Remove the node with a key equivalent to ``key``.

    Returns the new root and the detached node, or None in its place when
    no such key exists. Every other node stays the same object.
    """
    return _remove(root, key, less)


def first_node(root: Optional[AvlNode]) -> Optional[AvlNode]:
    """The node with the smallest key, or None for an empty tree."""
    if root is None:
        return None
    while root.left is not None:
        root = root.left
    return root


def last_node(root: Optional[AvlNode]) -> Optional[AvlNode]:
    """The node with the largest key, or None for an empty tree."""
    if root is None:
        return None
    while root.right is not None:
        root = root.right
    return root


def successor(node: AvlNode) -> Optional[AvlNode]:
    """The next node in key order, or None after the last one."""
    if node.right is not None:
        return first_node(node.right)
    while node.parent is not None and node is node.parent.right:
        node = node.parent
    return node.parent


def predecessor(node: AvlNode) -> Optional[AvlNode]:
    """The previous node in key order, or None before the first one."""
    if node.left is not None:
        return last_node(node.left)
    while node.parent is not None and node is node.parent.left:
        node = node.parent
    return node.parent


def copy_tree(node: Optional[AvlNode], parent: Optional[AvlNode] = None) -> Optional[AvlNode]:
    """Deep copy of a subtree, attached under ``parent``."""
    if node is None:
        return None
    clone = AvlNode(node.key, node.value, parent)
    clone.height = node.height
    clone.left = copy_tree(node.left, clone)
    clone.right = copy_tree(node.right, clone)
    return clone