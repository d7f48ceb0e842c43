"""Arbitrary-precision signed integers with a decimal text form."""

from __future__ import annotations

import operator
from typing import Union

_DIGITS = frozenset("0123456789")

IntLike = Union["BigInt", int]


class BigInt:
    """A signed integer of any size.

    It can be built from an int, another BigInt or a decimal string. Each
    leading '-' of a string flips the sign, so "--5" is 5. Zero is never
    negative.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[BigInt, int, str] = 0) -> None:
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, str):
            self._value = self._parse(value)
        else:
            self._value = operator.index(value)

    @staticmethod
    def _parse(text: str) -> int:
        stripped = text.lstrip("-")
        negative = (len(text) - len(stripped)) % 2 == 1
        if not stripped or not set(stripped) <= _DIGITS:
            raise ValueError(f"Cannot convert {text!r} to a BigInt")
        magnitude = int(stripped)
        return -magnitude if negative else magnitude

    @staticmethod
    def _coerce(other: object) -> Union[int, None]:
        if isinstance(other, BigInt):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __eq__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: IntLike) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other: IntLike) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: IntLike) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: IntLike) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    def __add__(self, other: IntLike) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value - value)

    def __rsub__(self, other: IntLike) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(value - self._value)

    def __mul__(self, other: IntLike) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value * value)

    __rmul__ = __mul__