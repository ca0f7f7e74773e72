"""utils.py - Shared helpers: type assumptions, status collapsing, swap and random."""

from __future__ import annotations

import functools
from typing import Any, Callable

import numpy as np

from .constants import Status
from .exceptions import CollectionError, InvalidArgumentError
from .logger import get_logger

logger = get_logger(__name__)

_rng = np.random.default_rng()


def assumption(obj: Any, *expected: type) -> bool:
    """Check against multiple possible types"""
    for exp in expected:
        if isinstance(obj, exp):
            return True
    _raise_assert(obj, expected)
    return False


def _raise_assert(obj: Any, expected: tuple[type, ...]) -> None:
    if len(expected) == 1:
        msg = f"Expected {expected[0].__name__}, instead got {type(obj).__name__} (value: {obj!r})"
    else:
        names = ", ".join(exp.__name__ for exp in expected)
        msg = f"Expected one of ({names}), instead got {type(obj).__name__} (value: {obj!r})"
    raise AssertionError(msg)


def returns_status(method: Callable[..., Any]) -> Callable[..., Status]:
    """Collapse a mutator's CollectionError into Status.FAIL.

    The wrapped method signals failure by raising; success is whatever it
    returns (ignored). Instances whose ``config.strict`` is true get the
    exception instead.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> Status:
        try:
            method(self, *args, **kwargs)
        except CollectionError as e:
            config = getattr(self, "config", None)
            if config is not None and config.strict:
                raise
            logger.debug(f"{type(self).__name__}.{method.__name__} failed: {e}")
            return Status.FAIL
        return Status.OK

    return wrapper


def _byte_view(buf: Any) -> np.ndarray | None:
    try:
        return np.frombuffer(buf, dtype=np.uint8)
    except (TypeError, ValueError, BufferError):
        return None


def swap(a: Any, b: Any) -> Status:
    """Exchange the contents of two equal-length writable buffers.

    Accepts anything exposing the buffer protocol (bytearray, memoryview,
    numpy arrays, array.array). ``None``, empty, mismatched or read-only
    buffers fail; swapping a buffer with itself succeeds without copying.
    """
    if a is None or b is None:
        return Status.FAIL
    va = _byte_view(a)
    if va is None or va.size == 0:
        return Status.FAIL
    if a is b:
        return Status.OK
    vb = _byte_view(b)
    if vb is None or va.size != vb.size:
        return Status.FAIL
    if not (va.flags.writeable and vb.flags.writeable):
        return Status.FAIL
    tmp = va.copy()
    va[:] = vb
    vb[:] = tmp
    return Status.OK


def random_int(lo: int, hi: int) -> int:
    """Return a uniformly distributed integer in ``[lo, hi]``."""
    if lo > hi:
        raise InvalidArgumentError(f"random_int: lo ({lo}) > hi ({hi})")
    return int(_rng.integers(lo, hi, endpoint=True))
