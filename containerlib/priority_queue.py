"""A mergeable priority queue built on a skew heap."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional

from .exceptions import ContainerIsEmpty


class _HeapNode:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_HeapNode] = None
        self.right: Optional[_HeapNode] = None


def _copy_heap(root: Optional[_HeapNode]) -> Optional[_HeapNode]:
    if root is None:
        return None
    clone_root = _HeapNode(root.value)
    pending = [(root, clone_root)]
    while pending:
        source, target = pending.pop()
        if source.left is not None:
            target.left = _HeapNode(source.left.value)
            pending.append((source.left, target.left))
        if source.right is not None:
            target.right = _HeapNode(source.right.value)
            pending.append((source.right, target.right))
    return clone_root


class PriorityQueue:
    """A max-priority queue ordered by ``less``.

    ``top`` is an element that no other element is greater than. If
    ``less`` raises, the operation that called it leaves every queue
    involved exactly as it was.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        less: Callable[[Any, Any], bool] = operator.lt,
    ) -> None:
        self._less = less
        self._root: Optional[_HeapNode] = None
        self._size = 0
        for item in items:
            self.push(item)

    def _merge(self, first: Optional[_HeapNode], second: Optional[_HeapNode]) -> Optional[_HeapNode]:
        # All comparisons happen before any link changes, so a failing
        # comparison leaves both heaps untouched.
        path = []
        while first is not None and second is not None:
            if self._less(first.value, second.value):
                chosen = second
                second = second.right
            else:
                chosen = first
                first, second = second, first.right
            path.append(chosen)
        merged = first if first is not None else second
        for node in reversed(path):
            node.left, node.right = merged, node.left
            merged = node
        return merged

    def copy(self) -> PriorityQueue:
        """An independent queue with the same elements and ordering."""
        clone = PriorityQueue(less=self._less)
        clone._root = _copy_heap(self._root)
        clone._size = self._size
        return clone

    __copy__ = copy

    def top(self) -> Any:
        """The greatest element; raises ContainerIsEmpty when empty."""
        if self._root is None:
            raise ContainerIsEmpty("top of an empty priority queue")
        return self._root.value

    def push(self, value: Any) -> None:
        """Add an element."""
        self._root = self._merge(self._root, _HeapNode(value))
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the greatest element; raises ContainerIsEmpty when empty."""
        root = self._root
        if root is None:
            raise ContainerIsEmpty("pop from an empty priority queue")
        self._root = self._merge(root.left, root.right)
        self._size -= 1
        return root.value

    def merge(self, other: PriorityQueue) -> None:
        """Move every element of ``other`` into this queue, leaving ``other`` empty."""
        if other is self:
            raise ValueError("a priority queue cannot be merged into itself")
        self._root = self._merge(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"PriorityQueue(size={self._size})"