# containerlib

This package provides containers with explicit cursors and clear errors: an
ordered map, a mergeable priority queue and a bounds-checked vector. It also
has a small signed big-integer type and a dense matrix type. It is a pure
library with no dependencies outside the standard library.

## Installation

```
pip install containerlib
```

Use `pip install "containerlib[test]"` to also get pytest for running the
test suite.

## Containers

### `containerlib.treemap.TreeMap`

`TreeMap` is an ordered map kept in a height-balanced (AVL) search tree. Keys
are ordered by a `less(a, b)` callable, which defaults to `<`. Two keys count
as the same key when neither is less than the other.

```python
from containerlib.treemap import TreeMap

m = TreeMap({3: "c", 1: "a"})
m[2] = "b"
print(list(m))              # [1, 2, 3]
print(m.at(2))              # b
cursor, inserted = m.insert(4, "d")
print(cursor.key(), inserted)   # 4 True
m.erase(m.find(1))
print(list(m.items()))      # [(2, 'b'), (3, 'c'), (4, 'd')]
```

- `m[key]` and `at(key)` raise `IndexOutOfBound` when the key is missing.
  `del m[key]` raises the same error.
- `m[key] = value` adds the entry or overwrites the existing value.
- `insert(key, value)` keeps an existing value. It returns `(cursor, inserted)`.
- `setdefault(key, default)` stores `default` under a missing key and returns
  the value now under the key.
- `count(key)` returns 1 or 0. `in`, `len`, iteration over keys, `items()`,
  `clear()`, `copy()` and `height()` (the tree's height, 0 when empty) also work.
- `begin()`, `end()` and `find(key)` return a `MapCursor`. A cursor's
  `advance()` moves it to the next key in order, and from the last key to the
  end. `retreat()` moves it back, and from the end to the last key. Calling
  `advance()` at the end, or `retreat()` at the first key or in an empty map,
  raises `InvalidIterator`. `key()`, `value()` and `item()` read the entry and
  raise `InvalidIterator` on the end cursor. `at_end()` tells whether the
  cursor is at the end.
- `erase(cursor)` raises `InvalidIterator` for the end cursor or for a cursor
  that belongs to another map.

The tree operations are also available on their own in `containerlib.avl`:
`AvlNode`, `node_height`, `find_node`, `insert_node`, `remove_node`,
`first_node`, `last_node`, `successor`, `predecessor` and `copy_tree`. These
work on root nodes. The functions that change the tree return the new root.

### `containerlib.priority_queue.PriorityQueue`

`PriorityQueue` is a max-priority queue built on a skew heap. It is ordered by
`less`, which defaults to `<`.

```python
from containerlib.priority_queue import PriorityQueue

q = PriorityQueue([5, 1, 9])
q.push(7)
print(q.top())      # 9
print(q.pop())      # 9
other = PriorityQueue([10])
q.merge(other)      # other is now empty
print(q.top(), len(other))   # 10 0
```

- `top()` and `pop()` on an empty queue raise `ContainerIsEmpty`.
- `merge(other)` moves every element of `other` into the queue. Merging a queue
  into itself raises `ValueError`.
- If `less` raises during `push`, `pop` or `merge`, the exception propagates.
  Every queue involved is left exactly as it was before the call.
- `copy()` returns an independent queue. `len()` and truth testing give the
  size.

### `containerlib.vector.Vector`

`Vector` is a growable sequence. Every index is checked, and `insert` and
`erase` take either an index or a cursor.

```python
from containerlib.vector import Vector

v = Vector(range(5))
v.append(10)
v.insert(v.begin() + 2, 99)
v.erase(0)
print(list(v), v.front(), v.back())   # [1, 99, 2, 3, 4, 10] 1 10
```

- `v[i]`, `v[i] = x` and `at(i)` raise `IndexOutOfBound` when the index is
  outside `[0, len)`. Negative indices are not accepted.
- `insert(position, value)` accepts positions in `[0, len]` and returns a
  cursor to the new element. `erase(position)` returns a cursor to the element
  that follows the removed one.
- `front()`, `back()` and `pop()` on an empty vector raise `ContainerIsEmpty`.
- `begin()` and `end()` return a `VectorCursor`. You can add an offset to a
  cursor or subtract an offset from it. Subtracting one cursor from another
  gives the distance between them; cursors of different vectors raise
  `InvalidIterator`. `value()` reads the element under a cursor.
- `capacity()` reports the tracked capacity. `append` doubles a full capacity,
  starting from 1. `insert` multiplies a full capacity by ten. `pop` halves the
  capacity once fewer than a quarter of it is used. `clear()` keeps the
  capacity. `copy()` copies each element shallowly.

## Numeric helpers

### `containerlib.bigint.BigInt`

`BigInt` is a signed integer of any size. You can build one from an `int`,
another `BigInt` or a decimal string. In a string, each leading `-` flips the
sign, so `"--5"` is 5. Any other non-digit character, and an empty string,
raises `ValueError`. `BigInt` supports `+`, `-` and `*` with other `BigInt`
values or plain ints, as well as comparisons, `abs`, unary minus, `str`,
`int` and hashing.

```python
from containerlib.bigint import BigInt

print(BigInt("123456789") * BigInt(-1000))   # -123456789000
```

### `containerlib.matrix.Matrix`

`Matrix(rows, cols, fill=0)` is a dense grid. You read and write cells as
`m[row][col]`, and `row_count()` and `col_count()` give its shape.

- It supports `+`, `-`, unary `-`, `*` with another matrix or a scalar on
  either side, `/` by a scalar, and `==`.
- Adding or subtracting matrices of different shapes raises `ValueError`, and
  so does multiplying matrices whose inner sizes differ.
- `str()` prints one row per line with each cell right-aligned in 15
  characters, and floats with 8 decimals.
- The module also provides `transpose(matrix)`, `identity(size)` and
  `power(matrix, exponent)`. `power` raises `ValueError` for a non-square
  matrix or a negative exponent.

```python
from containerlib.matrix import Matrix, identity, power, transpose

a = Matrix(2, 2, 1)
print(power(a, 3) == a * a * a)   # True
print(transpose(identity(2)) == identity(2))   # True
```

## Errors

All container errors live in `containerlib.exceptions` and derive from
`ContainerError`. Each one also derives from a built-in exception, so code can
catch either:

- `IndexOutOfBound` (an `IndexError`)
- `ContainerIsEmpty` (an `IndexError`)
- `InvalidIterator` (a `ValueError`)
- `RuntimeFailure` (a `RuntimeError`). The containers never raise it
  themselves. It is there for user code, such as comparison functions, to
  raise.

## What it does not do

This is a library only. It has no command-line tool, and it does not save
containers to disk.