"""
Utility helpers: swap, random_int, assumption and returns_status.
"""

import numpy as np
import pytest

from collection.config import TableConfig
from collection.constants import Status
from collection.exceptions import CollectionError, InvalidArgumentError
from collection.utils import assumption, random_int, returns_status, swap


def test_swap_bytearrays():
    a, b = bytearray(b"left"), bytearray(b"RGHT")
    assert swap(a, b) is Status.OK
    assert a == b"RGHT" and b == b"left"


def test_swap_numpy_arrays():
    a = np.array([1, 2, 3], dtype=np.int32)
    b = np.array([7, 8, 9], dtype=np.int32)
    assert swap(a, b)
    assert a.tolist() == [7, 8, 9]
    assert b.tolist() == [1, 2, 3]


def test_swap_disjoint_halves_of_one_buffer():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    assert swap(view[:3], view[3:])
    assert buf == b"defabc"


def test_swap_with_itself_is_a_no_op():
    a = bytearray(b"same")
    assert swap(a, a) is Status.OK
    assert a == b"same"


@pytest.mark.parametrize(
    "a,b",
    [
        (None, bytearray(b"x")),
        (bytearray(b"x"), None),
        (bytearray(), bytearray()),
        (bytearray(b"ab"), bytearray(b"abc")),
        (b"ro", bytearray(b"rw")),
        (12, 34),
    ],
)
def test_swap_failures(a, b):
    snapshot = bytes(a) if isinstance(a, bytearray) else None
    assert swap(a, b) is Status.FAIL
    if snapshot is not None:
        assert a == snapshot


def test_random_int_bounds():
    draws = {random_int(0, 3) for _ in range(400)}
    assert draws == {0, 1, 2, 3}
    assert random_int(5, 5) == 5
    assert all(-10 <= random_int(-10, -7) <= -7 for _ in range(50))
    with pytest.raises(InvalidArgumentError):
        random_int(3, 2)


def test_assumption():
    assert assumption(1, int)
    assert assumption(1.0, int, float)
    with pytest.raises(AssertionError, match="Expected int"):
        assumption("x", int)
    with pytest.raises(AssertionError, match="one of"):
        assumption("x", int, float)


class _Widget:
    def __init__(self, strict=False):
        self.config = TableConfig(strict=strict)

    @returns_status
    def ok(self):
        return 42

    @returns_status
    def broken(self):
        raise InvalidArgumentError("bad widget")

    @returns_status
    def crashes(self):
        raise RuntimeError("not a collection error")


def test_returns_status_collapses_collection_errors():
    w = _Widget()
    assert w.ok() is Status.OK
    assert w.broken() is Status.FAIL
    assert w.ok.__name__ == "ok"
    with pytest.raises(RuntimeError):
        w.crashes()


def test_returns_status_strict_reraises():
    with pytest.raises(CollectionError, match="bad widget"):
        _Widget(strict=True).broken()


def test_status_truthiness():
    assert Status.OK
    assert not Status.FAIL
    assert int(Status.FAIL) == -1


def test_get_logger_namespaces_under_package():
    import logging

    from collection.logger import get_logger

    assert get_logger("extras").name == "collection.extras"
    assert get_logger("collection.chtbl").name == "collection.chtbl"
    assert get_logger("collection").name == "collection"
    root = logging.getLogger("collection")
    assert any(isinstance(h, logging.NullHandler) for h in root.handlers)
