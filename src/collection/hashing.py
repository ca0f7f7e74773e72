"""hashing.py - Hash functions and default byte-string key callbacks.

``hash_str`` is the PJW/ELF hash from the dragon book; ``hash_int`` is
the murmur3 32-bit finaliser evaluated with numpy ``uint32`` arithmetic
so that wrap-around matches unsigned C semantics and whole arrays of keys
can be hashed at once. Neither is seeded.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from .constants import HASH_MASK
from .exceptions import InvalidArgumentError

_M1 = np.uint32(0x85EBCA6B)
_M2 = np.uint32(0xC2B2AE35)


def as_cstring(key: Any) -> bytes:
    """Encode *key* the way the default callbacks see it.

    ``str`` is UTF-8 encoded, bytes-like objects are copied; the result is
    cut at the first NUL byte.
    """
    if isinstance(key, str):
        data = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray, memoryview)):
        data = bytes(key)
    else:
        raise InvalidArgumentError(
            f"Default key callbacks need str or bytes, got {type(key).__name__}"
        )
    nul = data.find(b"\x00")
    return data if nul < 0 else data[:nul]


def hash_str(key: str | bytes) -> int:
    """PJW hash over the bytes of *key* up to the first NUL."""
    h = 0
    for c in as_cstring(key):
        h = ((h << 4) + c) & HASH_MASK
        high = h & 0xF0000000
        if high:
            h ^= high >> 24
            h ^= high
    return h


def hash_int(key: int | NDArray[np.integer]) -> int | NDArray[np.uint32]:
    """Mix an integer (or an array of integers) into 32 unsigned bits.

    Python ints are reduced modulo 2**32 first, so negative and oversized
    values hash like their two's-complement low word.
    """
    scalar = isinstance(key, (int, np.integer))
    if scalar:
        h = np.array([int(key) & HASH_MASK], dtype=np.uint32)
    else:
        arr = np.asarray(key)
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidArgumentError(f"hash_int needs integers, got {arr.dtype}")
        h = arr.astype(np.uint32, copy=True)
    h ^= h >> np.uint32(16)
    h *= _M1
    h ^= h >> np.uint32(13)
    h *= _M2
    h ^= h >> np.uint32(16)
    if scalar:
        return int(h[0])
    return h


def default_hash(key: Any) -> int:
    return hash_str(as_cstring(key))


def default_match(key1: Any, key2: Any) -> bool:
    return as_cstring(key1) == as_cstring(key2)
