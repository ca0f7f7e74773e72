"""exceptions.py - Exception hierarchy for the collection library.

Defines exceptions for:
- Invalid arguments (None self/key, bad predecessor node, bad config)
- Operations on uninitialised or destroyed containers
- Absent keys
- Allocation failures while growing a directory or a chain
- Pops from empty sequence containers

The hash table and set collapse these into ``Status.FAIL`` unless
configured ``strict``; sequence containers raise them directly.
"""

from __future__ import annotations


class CollectionError(Exception):
    """Base exception for all collection errors."""

    pass


class InvalidArgumentError(CollectionError, ValueError):
    """Raised when an argument is missing or of an unusable type.

    Examples:
        - ``None`` key on insert/remove
        - A predecessor node that has no successor
        - A key the default byte-string callbacks cannot encode
    """

    pass


class StateViolationError(InvalidArgumentError):
    """Raised when a container is used outside the ``live`` state.

    Also raised by iterators that outlived a structural mutation.
    """

    pass


class NotFoundError(CollectionError, KeyError):
    """Raised when a key is absent."""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class AllocationError(CollectionError, MemoryError):
    """Raised when storage for a directory or an entry cannot be allocated."""

    def __init__(self, what: str, requested: int | None = None):
        self.what = what
        self.requested = requested
        detail = f" ({requested} slots)" if requested is not None else ""
        super().__init__(f"Failed to allocate {what}{detail}")


class EmptyContainerError(CollectionError, IndexError):
    """Raised when popping from an empty sequence container."""

    def __init__(self, container: str):
        self.container = container
        super().__init__(f"{container} is empty")
