import pytest

from containerlib.exceptions import (
    ContainerError,
    ContainerIsEmpty,
    IndexOutOfBound,
    InvalidIterator,
    RuntimeFailure,
)


def test_message_joins_variant_and_detail():
    assert str(IndexOutOfBound("position 7")) == "index out of bound position 7"


def test_message_without_detail_is_variant_only():
    assert str(ContainerIsEmpty()) == "container is empty"


def test_detail_is_kept():
    error = InvalidIterator("cursor from another map")
    assert error.detail == "cursor from another map"
    assert str(error).endswith("cursor from another map")


@pytest.mark.parametrize(
    "cls", [IndexOutOfBound, RuntimeFailure, InvalidIterator, ContainerIsEmpty]
)
def test_every_error_is_caught_as_container_error(cls):
    error = cls("detail")
    assert isinstance(error, ContainerError)
    assert error.detail == "detail"
    assert str(error).endswith(" detail")


def test_index_errors_are_caught_as_index_error():
    out_of_bound = IndexOutOfBound()
    empty = ContainerIsEmpty()
    assert isinstance(out_of_bound, IndexError)
    assert isinstance(empty, IndexError)
    assert str(out_of_bound) == "index out of bound"
    assert str(empty) == "container is empty"


def test_runtime_failure_is_a_runtime_error():
    error = RuntimeFailure("compare failed")
    assert isinstance(error, RuntimeError)
    assert str(error) == "runtime error compare failed"