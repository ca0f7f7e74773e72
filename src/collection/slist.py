"""slist.py - Singly linked list; the bucket-chain storage of the hash table.

- Append and prepend in O(1) (head and tail pointers).
- Removal of the successor of a node in O(1); ``None`` addresses the head.
- Node splicing (``unlink_front`` / ``link_front``) moves link cells
  between lists without touching their data, as rehashing requires.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .exceptions import EmptyContainerError, InvalidArgumentError


class SListNode:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: SListNode | None = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"SListNode({self.data!r})"


class SList:
    """
    SList: singly linked list with an optional element destructor.

    ``destroy`` (if given) is called on data discarded by ``clear``,
    ``destroy`` and ``remove_after(..., keep=False)``; data handed back to
    the caller by a pop is never destroyed.
    """

    __slots__ = ("head", "tail", "size", "destroy_fn")

    def __init__(self, destroy: Callable[[Any], None] | None = None) -> None:
        self.head: SListNode | None = None
        self.tail: SListNode | None = None
        self.size: int = 0
        self.destroy_fn = destroy

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size > 0

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"SList([{', '.join(repr(d) for d in self)}])"

    def nodes(self) -> Iterator[SListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def empty(self) -> bool:
        return self.size == 0

    def front(self) -> Any:
        return self.head.data if self.head is not None else None

    def back(self) -> Any:
        return self.tail.data if self.tail is not None else None

    def push_front(self, data: Any) -> SListNode:
        return self.link_front(SListNode(data))

    def push_back(self, data: Any) -> SListNode:
        node = SListNode(data)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self.size += 1
        return node

    def pop_front(self) -> Any:
        node = self.unlink_front()
        if node is None:
            raise EmptyContainerError("SList")
        return node.data

    def pop_back(self) -> Any:
        """Remove the tail in O(n); a singly linked list has no back pointer."""
        if self.head is None:
            raise EmptyContainerError("SList")
        if self.head is self.tail:
            return self.pop_front()
        prev = self.head
        while prev.next is not self.tail:
            prev = prev.next
        return self.remove_after(prev)

    def insert_after(self, node: SListNode | None, data: Any) -> SListNode:
        if node is None:
            raise InvalidArgumentError("insert_after needs a predecessor node")
        new_node = SListNode(data, node.next)
        node.next = new_node
        if self.tail is node:
            self.tail = new_node
        self.size += 1
        return new_node

    def remove_after(self, prev: SListNode | None, keep: bool = True) -> Any:
        """Unlink the node following *prev* (the head when *prev* is None).

        Returns the unlinked data. With ``keep=False`` the data is passed to
        the list's destructor instead and None is returned.
        """
        if prev is None:
            removed = self.head
            if removed is None:
                raise InvalidArgumentError("remove_after on an empty list")
            self.head = removed.next
        else:
            removed = prev.next
            if removed is None:
                raise InvalidArgumentError("remove_after: predecessor has no successor")
            prev.next = removed.next
        if self.tail is removed:
            self.tail = prev
        removed.next = None
        self.size -= 1
        if keep:
            return removed.data
        if self.destroy_fn is not None:
            self.destroy_fn(removed.data)
        return None

    def unlink_front(self) -> SListNode | None:
        """Detach and return the head node itself, or None when empty."""
        node = self.head
        if node is None:
            return None
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        self.size -= 1
        return node

    def link_front(self, node: SListNode) -> SListNode:
        """Splice an unlinked node in as the new head."""
        node.next = self.head
        self.head = node
        if self.tail is None:
            self.tail = node
        self.size += 1
        return node

    def clear(self) -> None:
        node = self.head
        while node is not None:
            nxt = node.next
            if self.destroy_fn is not None:
                self.destroy_fn(node.data)
            node.next = None
            node = nxt
        self.head = None
        self.tail = None
        self.size = 0

    def destroy(self) -> None:
        self.clear()
        self.destroy_fn = None
