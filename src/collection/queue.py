"""queue.py - FIFO adaptor over SList"""

from __future__ import annotations

from typing import Any, Callable

from .exceptions import EmptyContainerError
from .slist import SList


class Queue:
    __slots__ = ("_slist",)

    def __init__(self, destroy: Callable[[Any], None] | None = None) -> None:
        self._slist = SList(destroy)

    def __len__(self) -> int:
        return self._slist.size

    def size(self) -> int:
        return self._slist.size

    def empty(self) -> bool:
        return self._slist.empty()

    def enqueue(self, data: Any) -> None:
        self._slist.push_back(data)

    def dequeue(self) -> Any:
        if self._slist.empty():
            raise EmptyContainerError("Queue")
        return self._slist.pop_front()

    def peek(self) -> Any:
        """Front element, or None when empty."""
        return self._slist.front()

    def clear(self) -> None:
        self._slist.clear()

    def destroy(self) -> None:
        self._slist.destroy()
