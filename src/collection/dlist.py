"""dlist.py - Doubly linked list"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .exceptions import EmptyContainerError, InvalidArgumentError


class DListNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: DListNode | None = None
        self.next: DListNode | None = None

    def __repr__(self) -> str:
        return f"DListNode({self.data!r})"


class DList:
    """
    DList: doubly linked list with O(1) insertion and removal at any node.

    Node arguments must belong to this list. Inserting relative to ``None``
    is only allowed while the list is empty and places the first element.
    """

    __slots__ = ("head", "tail", "size", "destroy_fn")

    def __init__(self, destroy: Callable[[Any], None] | None = None) -> None:
        self.head: DListNode | None = None
        self.tail: DListNode | None = None
        self.size = 0
        self.destroy_fn = destroy

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def empty(self) -> bool:
        return self.size == 0

    def _link_first(self, node: DListNode) -> DListNode:
        self.head = self.tail = node
        self.size = 1
        return node

    def insert_after(self, node: DListNode | None, data: Any) -> DListNode:
        new_node = DListNode(data)
        if node is None:
            if self.size:
                raise InvalidArgumentError("insert_after(None) on a non-empty DList")
            return self._link_first(new_node)
        new_node.prev = node
        new_node.next = node.next
        if node.next is None:
            self.tail = new_node
        else:
            node.next.prev = new_node
        node.next = new_node
        self.size += 1
        return new_node

    def insert_before(self, node: DListNode | None, data: Any) -> DListNode:
        new_node = DListNode(data)
        if node is None:
            if self.size:
                raise InvalidArgumentError("insert_before(None) on a non-empty DList")
            return self._link_first(new_node)
        new_node.next = node
        new_node.prev = node.prev
        if node.prev is None:
            self.head = new_node
        else:
            node.prev.next = new_node
        node.prev = new_node
        self.size += 1
        return new_node

    def remove(self, node: DListNode | None) -> Any:
        """Unlink *node* and return its data (ownership goes to the caller)."""
        if node is None or self.size == 0:
            raise InvalidArgumentError("remove needs a node of a non-empty DList")
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self.size -= 1
        return node.data

    def push_front(self, data: Any) -> DListNode:
        return self.insert_before(self.head, data)

    def push_back(self, data: Any) -> DListNode:
        return self.insert_after(self.tail, data)

    def pop_front(self) -> Any:
        if self.head is None:
            raise EmptyContainerError("DList")
        return self.remove(self.head)

    def pop_back(self) -> Any:
        if self.tail is None:
            raise EmptyContainerError("DList")
        return self.remove(self.tail)

    def clear(self) -> None:
        node = self.head
        while node is not None:
            nxt = node.next
            if self.destroy_fn is not None:
                self.destroy_fn(node.data)
            node.prev = node.next = None
            node = nxt
        self.head = self.tail = None
        self.size = 0

    def destroy(self) -> None:
        self.clear()
        self.destroy_fn = None
