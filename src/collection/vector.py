"""vector.py - Dynamic array backed by a contiguous numpy object array."""

from __future__ import annotations

from typing import Any, Callable, Iterator

import numpy as np

from .constants import VECTOR_MIN_CAPACITY
from .exceptions import AllocationError, EmptyContainerError, InvalidArgumentError


def _allocate(capacity: int) -> np.ndarray:
    try:
        return np.empty(capacity, dtype=object)
    except MemoryError as e:
        raise AllocationError("vector storage", capacity) from e


class Vector:
    """
    Vector: growable array of arbitrary objects.

    - Capacity doubles when full; ``shrink_to_fit`` trims it back.
    - ``destroy`` (if given) runs on non-None elements dropped by
      ``pop_back``, ``resize`` (shrinking), ``clear`` and ``destroy``.
    """

    __slots__ = ("_data", "_size", "destroy_fn")

    def __init__(self, destroy: Callable[[Any], None] | None = None) -> None:
        self._data = _allocate(0)
        self._size = 0
        self.destroy_fn = destroy

    @classmethod
    def with_capacity(
        cls, capacity: int, destroy: Callable[[Any], None] | None = None
    ) -> Vector:
        vec = cls(destroy)
        vec.reserve(capacity)
        return vec

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._size):
            yield self._data[i]

    def __getitem__(self, index: int) -> Any:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError(f"Vector index {index} out of range")
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError(f"Vector index {index} out of range")
        self._data[index] = value

    def __repr__(self) -> str:
        return f"Vector(size={self._size}, capacity={self.capacity})"

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._data)

    def empty(self) -> bool:
        return self._size == 0

    def at(self, index: int) -> Any:
        """Element at *index*, or None when out of range."""
        if 0 <= index < self._size:
            return self._data[index]
        return None

    def front(self) -> Any:
        return self.at(0)

    def back(self) -> Any:
        return self.at(self._size - 1)

    def reserve(self, capacity: int) -> None:
        if capacity < 0:
            raise InvalidArgumentError(f"capacity must be >= 0, got {capacity}")
        if capacity <= self.capacity:
            return
        data = _allocate(capacity)
        data[: self._size] = self._data[: self._size]
        self._data = data

    def push_back(self, element: Any) -> None:
        if self._size == self.capacity:
            self.reserve(max(VECTOR_MIN_CAPACITY, self.capacity * 2))
        self._data[self._size] = element
        self._size += 1

    def pop_back(self) -> None:
        if self._size == 0:
            raise EmptyContainerError("Vector")
        self._size -= 1
        element = self._data[self._size]
        self._data[self._size] = None
        if self.destroy_fn is not None and element is not None:
            self.destroy_fn(element)

    def resize(self, new_size: int) -> None:
        """Grow with None padding or shrink, destroying dropped elements."""
        if new_size < 0:
            raise InvalidArgumentError(f"size must be >= 0, got {new_size}")
        if new_size > self.capacity:
            self.reserve(new_size)
        while self._size > new_size:
            self.pop_back()
        if new_size > self._size:
            self._data[self._size : new_size] = None
            self._size = new_size

    def shrink_to_fit(self) -> None:
        if self.capacity == self._size:
            return
        data = _allocate(self._size)
        data[:] = self._data[: self._size]
        self._data = data

    def clear(self) -> None:
        while self._size:
            self.pop_back()

    def destroy(self) -> None:
        self.clear()
        self._data = _allocate(0)
        self.destroy_fn = None
