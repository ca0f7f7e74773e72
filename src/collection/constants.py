"""constants.py - Canonical constants and enums for the collection library."""

from __future__ import annotations

from enum import Enum, IntEnum

# Hash table sizing
MIN_BUCKETS: int = 8
DEFAULT_BUCKETS: int = 16
DEFAULT_LOAD_FACTOR: float = 0.75
MAX_LOAD_FACTOR: float = 1.0
DEFAULT_GROWTH_FACTOR: float = 2.0
MIN_GROWTH_FACTOR: float = 1.5

# Hash output width
HASH_BITS: int = 32
HASH_MASK: int = (1 << HASH_BITS) - 1

# Vector growth
VECTOR_MIN_CAPACITY: int = 4


class Status(IntEnum):
    """Two-valued outcome of a mutating operation."""

    OK = 0
    FAIL = -1

    def __bool__(self) -> bool:
        return self is Status.OK


class TableState(Enum):
    UNINITIALISED = 0
    LIVE = 1
    DESTROYED = 2
