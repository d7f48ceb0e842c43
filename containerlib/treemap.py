"""An ordered map kept in a height-balanced search tree."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union

from .avl import (
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
from .exceptions import IndexOutOfBound, InvalidIterator

Less = Callable[[Any, Any], bool]


class MapCursor:
    """A position in a TreeMap: an entry, or the place just past the last one.

    A cursor stays valid while its entry is in the map; removing other
    entries does not move it.
    """

    __slots__ = ("container", "node")

    def __init__(self, container: Optional[TreeMap], node: Optional[AvlNode]) -> None:
        self.container = container
        self.node = node

    def advance(self) -> MapCursor:
        """Move to the next entry in key order; the last one moves to the end."""
        if self.container is None or self.node is None:
            raise InvalidIterator("cannot advance past the end")
        self.node = successor(self.node)
        return self

    def retreat(self) -> MapCursor:
        """Move to the previous entry; raises InvalidIterator at the first one."""
        if self.container is None:
            raise InvalidIterator("cursor is not attached to a map")
        if self.node is None:
            last = last_node(self.container._root)
            if last is None:
                raise InvalidIterator("cannot retreat in an empty map")
            self.node = last
            return self
        previous = predecessor(self.node)
        if previous is None:
            raise InvalidIterator("cannot retreat before the first entry")
        self.node = previous
        return self

    def _entry(self) -> AvlNode:
        if self.node is None:
            raise InvalidIterator("the end cursor has no entry")
        return self.node

    def key(self) -> Any:
        """Key of the entry under the cursor."""
        return self._entry().key

    def value(self) -> Any:
        """Value of the entry under the cursor."""
        return self._entry().value

    def item(self) -> tuple[Any, Any]:
        """The (key, value) pair under the cursor."""
        node = self._entry()
        return node.key, node.value

    def at_end(self) -> bool:
        """Whether the cursor stands past the last entry."""
        return self.node is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapCursor):
            return NotImplemented
        return self.container is other.container and self.node is other.node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.node is None:
            return "MapCursor(<end>)"
        return f"MapCursor({self.node.key!r})"


class TreeMap:
    """A map whose keys are kept sorted by ``less``.

    Two keys are the same key when neither is less than the other.
    """

    def __init__(
        self,
        items: Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]] = (),
        less: Less = operator.lt,
    ) -> None:
        self._less = less
        self._root: Optional[AvlNode] = None
        self._size = 0
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self[key] = value

    def copy(self) -> TreeMap:
        """An independent map with the same entries and ordering."""
        clone = TreeMap(less=self._less)
        clone._root = copy_tree(self._root, None)
        clone._size = self._size
        return clone

    __copy__ = copy

    def _node(self, key: Any) -> AvlNode:
        node = find_node(self._root, key, self._less)
        if node is None:
            raise IndexOutOfBound(f"no key {key!r}")
        return node

    def at(self, key: Any) -> Any:
        """The value stored under ``key``; raises IndexOutOfBound if absent."""
        return self._node(key).value

    def __getitem__(self, key: Any) -> Any:
        return self._node(key).value

    def __setitem__(self, key: Any, value: Any) -> None:
        self._root, node, inserted = insert_node(self._root, key, value, self._less)
        if inserted:
            self._size += 1
        else:
            node.value = value

    def __delitem__(self, key: Any) -> None:
        root, removed = remove_node(self._root, key, self._less)
        if removed is None:
            raise IndexOutOfBound(f"no key {key!r}")
        self._root = root
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        return find_node(self._root, key, self._less) is not None

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[AvlNode]:
        node = first_node(self._root)
        while node is not None:
            following = successor(node)
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._nodes())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """The (key, value) pairs in key order."""
        return ((node.key, node.value) for node in self._nodes())

    def setdefault(self, key: Any, default: Any = None) -> Any:
        """The value under ``key``, storing ``default`` there first if absent."""
        self._root, node, inserted = insert_node(self._root, key, default, self._less)
        if inserted:
            self._size += 1
        return node.value

    def insert(self, key: Any, value: Any) -> tuple[MapCursor, bool]:
        """Add an entry unless the key is present.

        Returns a cursor to the entry holding the key and whether it was
        added; an existing entry keeps its value.
        """
        self._root, node, inserted = insert_node(self._root, key, value, self._less)
        if inserted:
            self._size += 1
        return MapCursor(self, node), inserted

    def erase(self, cursor: MapCursor) -> None:
        """Remove the entry under ``cursor``.

        Raises InvalidIterator for the end cursor or a cursor of another map.
        """
        if cursor.container is not self or cursor.node is None:
            raise InvalidIterator("cursor does not point into this map")
        self._root, removed = remove_node(self._root, cursor.node.key, self._less)
        if removed is None:
            raise InvalidIterator("cursor does not point into this map")
        self._size -= 1

    def count(self, key: Any) -> int:
        """1 if the key is present, else 0."""
        return 0 if find_node(self._root, key, self._less) is None else 1

    def find(self, key: Any) -> MapCursor:
        """A cursor to the key's entry, or the end cursor if absent."""
        return MapCursor(self, find_node(self._root, key, self._less))

    def begin(self) -> MapCursor:
        """A cursor to the smallest key, or the end cursor when empty."""
        return MapCursor(self, first_node(self._root))

    def end(self) -> MapCursor:
        """The cursor past the last entry."""
        return MapCursor(self, None)

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the underlying tree; 0 when empty."""
        return node_height(self._root)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"TreeMap({{{body}}})"