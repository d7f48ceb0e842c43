"""Dense matrices of arbitrary numeric elements."""

from __future__ import annotations

import functools
import operator
from typing import Any, Callable, Iterator


class Matrix:
    """A rows x cols grid whose cells are reached as ``matrix[row][col]``."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int = 0, cols: int = 0, fill: Any = 0) -> None:
        rows = operator.index(rows)
        cols = operator.index(cols)
        if rows < 0 or cols < 0:
            raise ValueError("matrix sizes must not be negative")
        self._rows = rows
        self._cols = cols
        self._data = [[fill] * cols for _ in range(rows)]

    def row_count(self) -> int:
        """Number of rows."""
        return self._rows

    def col_count(self) -> int:
        """Number of columns."""
        return self._cols

    def __getitem__(self, row: int) -> list:
        return self._data[row]

    def __iter__(self) -> Iterator[list]:
        return iter(self._data)

    def _same_shape(self, other: Matrix) -> bool:
        return self._rows == other._rows and self._cols == other._cols

    def _map(self, func: Callable[[Any], Any]) -> Matrix:
        result = Matrix(self._rows, self._cols)
        result._data = [[func(cell) for cell in row] for row in self._data]
        return result

    def _zip(self, other: Matrix, func: Callable[[Any, Any], Any]) -> Matrix:
        if not self._same_shape(other):
            raise ValueError("different matrices' sizes")
        result = Matrix(self._rows, self._cols)
        result._data = [
            [func(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        ]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._same_shape(other) and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._zip(other, operator.add)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._zip(other, operator.sub)

    def __neg__(self) -> Matrix:
        return self._map(operator.neg)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise ValueError("different matrices' sizes")
            columns = list(zip(*other._data)) if other._rows else [()] * other._cols
            result = Matrix(self._rows, other._cols)
            result._data = [
                [_dot(row, column) for column in columns] for row in self._data
            ]
            return result
        return self._map(lambda cell: cell * other)

    def __rmul__(self, other: Any) -> Matrix:
        return self._map(lambda cell: cell * other)

    def __truediv__(self, other: Any) -> Matrix:
        return self._map(lambda cell: cell / other)

    def __str__(self) -> str:
        lines = ["\n"]
        for row in self._data:
            lines.append("".join(_format_cell(cell) for cell in row))
            lines.append("\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"


def _dot(row: Any, column: Any) -> Any:
    products = [a * b for a, b in zip(row, column)]
    if not products:
        return 0
    return functools.reduce(operator.add, products)


def _format_cell(cell: Any) -> str:
    if isinstance(cell, float):
        return f"{cell:>15.8f}"
    return f"{cell!s:>15}"


def transpose(matrix: Matrix) -> Matrix:
    """The matrix with rows and columns swapped."""
    result = Matrix(matrix.col_count(), matrix.row_count())
    for j, row in enumerate(matrix):
        for i, cell in enumerate(row):
            result[i][j] = cell
    return result


def identity(size: int) -> Matrix:
    """The size x size identity matrix."""
    result = Matrix(size, size, 0)
    for i in range(size):
        result[i][i] = 1
    return result


def power(matrix: Matrix, exponent: int) -> Matrix:
    """``matrix`` raised to a non-negative integer power."""
    if matrix.row_count() != matrix.col_count():
        raise ValueError("The row size and column size are different.")
    exponent = operator.index(exponent)
    if exponent < 0:
        raise ValueError("the exponent must not be negative")
    result = identity(matrix.col_count())
    base = matrix
    while exponent > 0:
        if exponent & 1:
            result = result * base
        base = base * base
        exponent >>= 1
    return result