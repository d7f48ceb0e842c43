"""A growable sequence with checked access and cursor-based editing."""

from __future__ import annotations

import copy as _copy
import operator
from typing import Any, Iterable, Iterator, Optional, Union

from .exceptions import ContainerIsEmpty, IndexOutOfBound, InvalidIterator


class VectorCursor:
    """A position in a Vector, given by its index.

    Cursors can be moved by adding or subtracting an offset, and two cursors
    of the same vector can be subtracted to get the distance between them.
    """

    __slots__ = ("container", "index")

    def __init__(self, container: Optional[Vector], index: int) -> None:
        self.container = container
        self.index = index

    def __add__(self, offset: int) -> VectorCursor:
        return VectorCursor(self.container, self.index + operator.index(offset))

    def __sub__(self, other: Union[VectorCursor, int]) -> Union[VectorCursor, int]:
        if isinstance(other, VectorCursor):
            if self.container is not other.container:
                raise InvalidIterator("cursors belong to different vectors")
            return self.index - other.index
        return VectorCursor(self.container, self.index - operator.index(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorCursor):
            return NotImplemented
        return self.container is other.container and self.index == other.index

    __hash__ = None  # type: ignore[assignment]

    def value(self) -> Any:
        """The element under the cursor; raises IndexOutOfBound outside the vector."""
        if self.container is None:
            raise InvalidIterator("cursor is not attached to a vector")
        return self.container.at(self.index)

    def __repr__(self) -> str:
        return f"VectorCursor(index={self.index})"


Position = Union[VectorCursor, int]


class Vector:
    """A sequence with bounds-checked access and a tracked capacity.

    Appending doubles the capacity when it is full, inserting multiplies it
    by ten, and popping halves it once fewer than a quarter of it is used.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        self._capacity = 0
        for item in items:
            self.append(item)

    def _grow(self, factor: int) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * factor

    def _checked(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexOutOfBound(f"index {index} not in [0, {len(self._items)})")
        return index

    def _resolve(self, position: Position) -> int:
        if isinstance(position, VectorCursor):
            return position - self.begin()  # type: ignore[return-value]
        return operator.index(position)

    def copy(self) -> Vector:
        """An independent vector holding copies of the elements, with the same capacity."""
        clone = Vector()
        clone._items = [_copy.copy(item) for item in self._items]
        clone._capacity = self._capacity
        return clone

    __copy__ = copy

    def at(self, index: int) -> Any:
        """The element at ``index``; raises IndexOutOfBound outside [0, len)."""
        return self._items[self._checked(index)]

    def __getitem__(self, index: int) -> Any:
        return self._items[self._checked(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._checked(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def front(self) -> Any:
        """The first element; raises ContainerIsEmpty when empty."""
        if not self._items:
            raise ContainerIsEmpty("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        """The last element; raises ContainerIsEmpty when empty."""
        if not self._items:
            raise ContainerIsEmpty("back of an empty vector")
        return self._items[-1]

    def begin(self) -> VectorCursor:
        """A cursor to the first element."""
        return VectorCursor(self, 0)

    def end(self) -> VectorCursor:
        """A cursor just past the last element."""
        return VectorCursor(self, len(self._items))

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def insert(self, position: Position, value: Any) -> VectorCursor:
        """Insert ``value`` before ``position`` and return a cursor to it.

        ``position`` is a cursor of this vector or an index in [0, len].
        """
        index = self._resolve(position)
        if not 0 <= index <= len(self._items):
            raise IndexOutOfBound(f"index {index} not in [0, {len(self._items)}]")
        self._grow(10)
        self._items.insert(index, value)
        return VectorCursor(self, index)

    def erase(self, position: Position) -> VectorCursor:
        """Remove the element at ``position`` and return a cursor to the one after it."""
        index = self._checked(self._resolve(position))
        del self._items[index]
        return VectorCursor(self, index)

    def append(self, value: Any) -> None:
        """Add an element at the end."""
        self._grow(2)
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last element; raises ContainerIsEmpty when empty."""
        if not self._items:
            raise ContainerIsEmpty("pop from an empty vector")
        value = self._items.pop()
        if len(self._items) < self._capacity // 4:
            self._capacity //= 2
        return value

    def capacity(self) -> int:
        """Number of elements the vector holds room for."""
        return self._capacity

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"