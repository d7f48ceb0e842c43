"""Exceptions raised by the containers in this package."""

from __future__ import annotations


class ContainerError(Exception):
    """Base class of every container error.

    The message is the error's variant followed by an optional detail.
    """

    variant = "container error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return " ".join(part for part in (self.variant, self.detail) if part)


class IndexOutOfBound(ContainerError, IndexError):
    """A position or key lies outside the container."""

    variant = "index out of bound"


class RuntimeFailure(ContainerError, RuntimeError):
    """A generic failure raised while an operation runs."""

    variant = "runtime error"


class InvalidIterator(ContainerError, ValueError):
    """A cursor was used where it is not valid."""

    variant = "invalid iterator"


class ContainerIsEmpty(ContainerError, IndexError):
    """An element was requested from an empty container."""

    variant = "container is empty"