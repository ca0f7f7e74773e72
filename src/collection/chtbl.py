"""chtbl.py - Chained hash table with load-factor driven rehashing.

The bucket directory is a Vector of SList chains; every chain node carries
a ChtblEntry. Keys live in the chain at ``hash(key) % buckets``. Inserting
a new key that pushes ``size / buckets`` above the threshold grows the
directory by ``growth_factor`` and splices every node into its new chain.
Rehashing never runs a destructor and never reallocates entries.

Ownership: when ``destroy_key`` / ``destroy_value`` are given the table
calls each at most once per key/value it owns (remove, clear, destroy,
and the old value on update). ``detach`` hands ownership back instead.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Callable, Iterator

import numpy as np

from .config import TableConfig
from .constants import HASH_MASK, MAX_LOAD_FACTOR, MIN_BUCKETS, Status, TableState
from .exceptions import (
    AllocationError,
    CollectionError,
    InvalidArgumentError,
    NotFoundError,
    StateViolationError,
)
from .hashing import default_hash, default_match
from .logger import get_logger
from .slist import SList, SListNode
from .utils import assumption, returns_status
from .vector import Vector

logger = get_logger(__name__)

HashFn = Callable[[Any], int]
MatchFn = Callable[[Any, Any], bool]
DestroyFn = Callable[[Any], None]


class ChtblEntry:
    """A key/value cell owned by the table (or by the caller after detach)."""

    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any = None) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"ChtblEntry({self.key!r}, {self.value!r})"


class ChainedHashTable:
    """
    ChainedHashTable: separate-chaining hash table over opaque keys.

    - ``hash_fn`` / ``equals`` default to byte-string semantics (see
      ``hashing.as_cstring``); ``equals`` must agree with ``hash_fn``.
    - Mutators return ``Status``; with ``config.strict`` they raise the
      underlying CollectionError instead.
    - Queries (find, contains, find_entry, load_factor, ...) return
      None/False/0 on absent keys or outside the ``live`` state.
    """

    def __init__(
        self,
        hash_fn: HashFn | None = None,
        equals: MatchFn | None = None,
        destroy_key: DestroyFn | None = None,
        destroy_value: DestroyFn | None = None,
        buckets: int | None = None,
        config: TableConfig | None = None,
    ) -> None:
        self.config = config if config is not None else TableConfig()
        assert assumption(self.config, TableConfig)
        self._reset()
        if buckets is None:
            buckets = self.config.initial_buckets
        self._init(hash_fn, equals, destroy_key, destroy_value, buckets)

    @classmethod
    def blank(cls, config: TableConfig | None = None) -> ChainedHashTable:
        """Return an uninitialised table; call ``init`` before use."""
        table = cls.__new__(cls)
        table.config = config if config is not None else TableConfig()
        table._reset()
        return table

    def _reset(self) -> None:
        self.hash_fn: HashFn | None = None
        self.match: MatchFn | None = None
        self.destroy_key: DestroyFn | None = None
        self.destroy_value: DestroyFn | None = None
        self.load_factor_threshold: float = self.config.load_factor
        self._directory: Vector | None = None
        "Vector of SList chains, None outside the live state"
        self._size: int = 0
        self._version: int = getattr(self, "_version", 0)
        "Bumped on every structural change; live iterators compare against it"
        self._state = getattr(self, "_state", TableState.UNINITIALISED)

    # ---- Lifecycle ---------------------------------------------------

    @returns_status
    def init(
        self,
        hash_fn: HashFn | None = None,
        equals: MatchFn | None = None,
        destroy_key: DestroyFn | None = None,
        destroy_value: DestroyFn | None = None,
    ) -> None:
        self._init(hash_fn, equals, destroy_key, destroy_value, self.config.initial_buckets)

    @returns_status
    def init_with_capacity(
        self,
        hash_fn: HashFn | None,
        equals: MatchFn | None,
        destroy_key: DestroyFn | None,
        destroy_value: DestroyFn | None,
        buckets: int,
    ) -> None:
        self._init(hash_fn, equals, destroy_key, destroy_value, buckets)

    def _init(self, hash_fn, equals, destroy_key, destroy_value, buckets) -> None:
        self._check_buckets(buckets)
        directory = self._new_directory(max(buckets, MIN_BUCKETS))
        if self._state is TableState.LIVE:
            self.destroy()
        self._reset()
        self.hash_fn = hash_fn if hash_fn is not None else default_hash
        self.match = equals if equals is not None else default_match
        self.destroy_key = destroy_key
        self.destroy_value = destroy_value
        self._directory = directory
        self._state = TableState.LIVE

    def destroy(self) -> None:
        """Dispose of every entry and release the directory.

        A no-op unless the table is live. ``init`` revives a destroyed table.
        """
        if self._state is not TableState.LIVE:
            return
        self._clear()
        self._directory.destroy()
        self._reset()
        self._version += 1
        self._state = TableState.DESTROYED

    @property
    def state(self) -> TableState:
        return self._state

    # ---- Core operations ---------------------------------------------

    @returns_status
    def insert(self, key: Any, value: Any = None) -> None:
        """Insert *key* -> *value*, or replace the value of an existing key.

        On update the table keeps its original key object; the supplied key
        is not adopted and remains the caller's to dispose of.
        """
        self._insert(key, value, adopt_key=False)

    @returns_status
    def upsert(self, key: Any, value: Any = None) -> None:
        """Like insert, but on update the supplied key replaces the stored one."""
        self._insert(key, value, adopt_key=True)

    def find(self, key: Any) -> Any:
        entry = self.find_entry(key)
        return entry.value if entry is not None else None

    def find_entry(self, key: Any) -> ChtblEntry | None:
        """Return the entry for *key*.

        The entry stays valid until the next insert of a new key, resize,
        clear or destroy.
        """
        if key is None or self._state is not TableState.LIVE:
            return None
        try:
            node = self._locate(key)[2]
        except CollectionError as e:
            logger.debug(f"[ChainedHashTable] lookup of {key!r} failed: {e}")
            return None
        return node.data if node is not None else None

    def contains(self, key: Any) -> bool:
        return self.find_entry(key) is not None

    @returns_status
    def remove(self, key: Any) -> None:
        self._dispose(self._unlink(key))

    def detach(self, key: Any) -> ChtblEntry | None:
        """Unlink *key* without running destructors and return its entry.

        Ownership of the entry's key and value passes to the caller.
        """
        try:
            return self._unlink(key)
        except CollectionError as e:
            if self.config.strict:
                raise
            logger.debug(f"[ChainedHashTable] detach of {key!r} failed: {e}")
            return None

    @returns_status
    def clear(self) -> None:
        """Dispose of every entry; the directory keeps its length."""
        self._require_live()
        self._clear()

    @returns_status
    def resize(self, buckets: int) -> None:
        """Rehash into ``max(buckets, MIN_BUCKETS)`` buckets."""
        self._require_live()
        self._check_buckets(buckets)
        self._rehash(buckets)

    @returns_status
    def set_load_factor(self, threshold: float) -> None:
        """Set the rehash threshold, clamped to (0, MAX_LOAD_FACTOR].

        Non-positive or NaN thresholds are ignored (FAIL), as is any call
        outside the live state. Does not rehash by itself; the next insert
        that crosses the threshold does.
        """
        self._require_live()
        if (
            isinstance(threshold, bool)
            or not isinstance(threshold, (int, float))
            or math.isnan(threshold)
            or threshold <= 0
        ):
            raise InvalidArgumentError(f"load factor must be a positive number, got {threshold!r}")
        self.load_factor_threshold = min(float(threshold), MAX_LOAD_FACTOR)

    def load_factor(self) -> float:
        buckets = self.buckets()
        return self._size / buckets if buckets else 0.0

    def size(self) -> int:
        return self._size

    def buckets(self) -> int:
        return len(self._directory) if self._directory is not None else 0

    def empty(self) -> bool:
        return self._size == 0

    # ---- Iteration ---------------------------------------------------

    def entries(self) -> Iterator[ChtblEntry]:
        """Iterate over all entries in unspecified order.

        Any structural mutation during iteration makes the next step raise
        StateViolationError. Value updates are allowed.
        """
        if self._state is not TableState.LIVE:
            return
        version = self._version
        for chain in self._directory:
            node = chain.head
            while node is not None:
                yield node.data
                if self._version != version:
                    raise StateViolationError("ChainedHashTable changed during iteration")
                node = node.next

    def keys(self) -> Iterator[Any]:
        for entry in self.entries():
            yield entry.key

    def values(self) -> Iterator[Any]:
        for entry in self.entries():
            yield entry.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        for entry in self.entries():
            yield entry.key, entry.value

    # ---- Dict interface ----------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Any) -> Any:
        entry = self.find_entry(key)
        if entry is None:
            raise NotFoundError(key)
        return entry.value

    def __setitem__(self, key: Any, value: Any) -> None:
        if self.insert(key, value) is Status.FAIL:
            raise InvalidArgumentError(f"Cannot insert key {key!r}")

    def __delitem__(self, key: Any) -> None:
        if self.remove(key) is Status.FAIL:
            raise NotFoundError(key)

    def __repr__(self) -> str:
        return (
            f"ChainedHashTable(state={self._state.name.lower()}, size={self._size}, "
            f"buckets={self.buckets()}, threshold={self.load_factor_threshold})"
        )

    # ---- Diagnostics -------------------------------------------------

    def validate(self) -> bool:
        """Check the structural invariants; True when all hold."""
        if self._state is not TableState.LIVE:
            return self._size == 0 and self._directory is None
        nbuckets = len(self._directory)
        if nbuckets < MIN_BUCKETS:
            return False
        total = 0
        for index, chain in enumerate(self._directory):
            seen: list[Any] = []
            for node in chain.nodes():
                key = node.data.key
                if key is None or self._hash(key) % nbuckets != index:
                    return False
                if any(self.match(other, key) for other in seen):
                    return False
                seen.append(key)
            if len(seen) != chain.size:
                return False
            total += len(seen)
        return total == self._size

    def stats(self) -> dict[str, Any]:
        """Chain-length diagnostics for the current directory."""
        nbuckets = self.buckets()
        lengths = np.fromiter(
            (chain.size for chain in self._directory or ()),
            dtype=np.int64,
            count=nbuckets,
        )
        used = lengths[lengths > 0]
        return {
            "size": self._size,
            "buckets": nbuckets,
            "load_factor": self.load_factor(),
            "threshold": self.load_factor_threshold,
            "empty_buckets": int(nbuckets - used.size),
            "max_chain": int(lengths.max()) if nbuckets else 0,
            "mean_chain": float(used.mean()) if used.size else 0.0,
            "histogram": np.bincount(lengths).tolist() if nbuckets else [],
        }

    # ---- Internals ---------------------------------------------------

    def _require_live(self) -> None:
        if self._state is not TableState.LIVE:
            raise StateViolationError(f"ChainedHashTable is {self._state.name.lower()}")

    @staticmethod
    def _check_key(key: Any) -> None:
        if key is None:
            raise InvalidArgumentError("key must not be None")

    @staticmethod
    def _check_buckets(buckets: Any) -> None:
        if isinstance(buckets, bool) or not isinstance(buckets, Integral) or buckets < 0:
            raise InvalidArgumentError(f"buckets must be a non-negative int, got {buckets!r}")

    def _hash(self, key: Any) -> int:
        h = self.hash_fn(key)
        if isinstance(h, bool) or not isinstance(h, Integral):
            raise InvalidArgumentError(f"hash function returned {type(h).__name__}, not int")
        return int(h) & HASH_MASK

    def _locate(self, key: Any) -> tuple[SList, SListNode | None, SListNode | None]:
        """Return ``(chain, prev, node)``; node is None when *key* is absent."""
        chain = self._directory[self._hash(key) % len(self._directory)]
        prev = None
        node = chain.head
        while node is not None:
            if self.match(node.data.key, key):
                return chain, prev, node
            prev = node
            node = node.next
        return chain, prev, None

    def _insert(self, key: Any, value: Any, adopt_key: bool) -> None:
        self._require_live()
        self._check_key(key)
        chain, _, node = self._locate(key)
        if node is not None:
            entry = node.data
            if adopt_key and entry.key is not key:
                old_key, entry.key = entry.key, key
                if self.destroy_key is not None:
                    self.destroy_key(old_key)
            old_value, entry.value = entry.value, value
            if old_value is not value:
                self._destroy_value(old_value)
            return

        try:
            chain.push_back(ChtblEntry(key, value))
        except MemoryError as e:
            raise AllocationError("hash table entry") from e
        self._size += 1
        self._version += 1

        nbuckets = len(self._directory)
        if self._size / nbuckets > self.load_factor_threshold:
            grown = max(int(nbuckets * self.config.growth_factor), nbuckets + 1)
            try:
                self._rehash(grown)
            except AllocationError as e:
                # the insert stands; the table stays valid in the old directory
                logger.warning(
                    f"[ChainedHashTable] automatic rehash to {grown} buckets failed, "
                    f"keeping {nbuckets}: {e}"
                )

    def _unlink(self, key: Any) -> ChtblEntry:
        self._require_live()
        self._check_key(key)
        chain, prev, node = self._locate(key)
        if node is None:
            raise NotFoundError(key)
        entry = chain.remove_after(prev)
        self._size -= 1
        self._version += 1
        return entry

    def _destroy_value(self, value: Any) -> None:
        if self.destroy_value is not None and value is not None:
            self.destroy_value(value)

    def _dispose(self, entry: ChtblEntry) -> None:
        if self.destroy_key is not None:
            self.destroy_key(entry.key)
        self._destroy_value(entry.value)

    def _clear(self) -> None:
        self._version += 1
        self._destroy_entries()

    def _destroy_entries(self) -> None:
        # _size drops per unlinked node so it stays exact if a destructor raises
        for chain in self._directory:
            node = chain.unlink_front()
            while node is not None:
                self._size -= 1
                self._dispose(node.data)
                node = chain.unlink_front()

    @staticmethod
    def _new_directory(nbuckets: int) -> Vector:
        try:
            directory = Vector.with_capacity(nbuckets)
            for _ in range(nbuckets):
                directory.push_back(SList())
        except AllocationError:
            raise
        except MemoryError as e:
            raise AllocationError("bucket directory", nbuckets) from e
        return directory

    def _rehash(self, buckets: int) -> None:
        nbuckets = max(buckets, MIN_BUCKETS)
        old = len(self._directory)
        if nbuckets == old:
            return
        directory = self._new_directory(nbuckets)
        for chain in self._directory:
            node = chain.unlink_front()
            while node is not None:
                directory[self._hash(node.data.key) % nbuckets].link_front(node)
                node = chain.unlink_front()
        self._directory = directory
        self._version += 1
        logger.debug(
            f"[ChainedHashTable] rehashed {old} -> {nbuckets} buckets (size={self._size})"
        )
