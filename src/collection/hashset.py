"""hashset.py - Keys-only projection of ChainedHashTable plus set algebra.

The algebra functions fill ``out`` with references to the key objects held
by the input sets; they do not copy keys. ``out`` is cleared first (running
its key destructor on what it held) and then stops owning keys, so the
caller must keep the input sets alive while ``out`` is in use.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .chtbl import ChainedHashTable, DestroyFn, HashFn, MatchFn
from .config import TableConfig
from .constants import Status, TableState
from .exceptions import CollectionError, InvalidArgumentError, StateViolationError
from .logger import get_logger

logger = get_logger(__name__)


class HashSet:
    """
    HashSet: unordered set of opaque keys backed by a ChainedHashTable.

    ``destroy`` (if given) owns the keys: it runs on remove, clear and
    destroy. Re-inserting an equal key keeps the stored object.
    """

    def __init__(
        self,
        hash_fn: HashFn | None = None,
        equals: MatchFn | None = None,
        destroy: DestroyFn | None = None,
        config: TableConfig | None = None,
    ) -> None:
        self.table = ChainedHashTable(hash_fn, equals, destroy_key=destroy, config=config)

    @property
    def config(self) -> TableConfig:
        return self.table.config

    def init(
        self,
        hash_fn: HashFn | None = None,
        equals: MatchFn | None = None,
        destroy: DestroyFn | None = None,
    ) -> Status:
        return self.table.init(hash_fn, equals, destroy, None)

    def destroy(self) -> None:
        self.table.destroy()

    def insert(self, key: Any) -> Status:
        return self.table.insert(key, None)

    def remove(self, key: Any) -> Status:
        return self.table.remove(key)

    def clear(self) -> Status:
        return self.table.clear()

    def contains(self, key: Any) -> bool:
        return self.table.contains(key)

    def size(self) -> int:
        return self.table.size()

    def empty(self) -> bool:
        return self.table.size() == 0

    def issubset(self, other: HashSet | None) -> bool:
        return subset(self, other)

    def __len__(self) -> int:
        return self.table.size()

    def __iter__(self) -> Iterator[Any]:
        return self.table.keys()

    def __contains__(self, key: Any) -> bool:
        return self.table.contains(key)

    def __repr__(self) -> str:
        return f"HashSet(size={self.size()}, buckets={self.table.buckets()})"


def _prepare(out: HashSet | None, a: HashSet | None, b: HashSet | None) -> None:
    if out is None or a is None or b is None:
        raise InvalidArgumentError("set algebra needs out, a and b")
    if out is a or out is b:
        raise InvalidArgumentError("out must be distinct from both operands")
    table = out.table
    if table.state is not TableState.LIVE:
        raise StateViolationError("output set is not live")
    table._clear()
    # out now borrows keys from a (and b for union)
    table.destroy_key = None
    if a.table.state is TableState.LIVE:
        table.hash_fn = a.table.hash_fn
        table.match = a.table.match


def _run(
    name: str,
    fill: Callable[[ChainedHashTable, HashSet, HashSet], None],
    out: HashSet | None,
    a: HashSet | None,
    b: HashSet | None,
) -> Status:
    try:
        _prepare(out, a, b)
        fill(out.table, a, b)
    except CollectionError as e:
        if out is not None and out.config.strict:
            raise
        logger.debug(f"[HashSet] {name} failed: {e}")
        return Status.FAIL
    return Status.OK


def _fill_intersection(target: ChainedHashTable, a: HashSet, b: HashSet) -> None:
    for key in a.table.keys():
        if b.contains(key):
            target._insert(key, None, adopt_key=False)


def _fill_union(target: ChainedHashTable, a: HashSet, b: HashSet) -> None:
    for key in a.table.keys():
        target._insert(key, None, adopt_key=False)
    for key in b.table.keys():
        if not target.contains(key):
            target._insert(key, None, adopt_key=False)


def _fill_difference(target: ChainedHashTable, a: HashSet, b: HashSet) -> None:
    for key in a.table.keys():
        if not b.contains(key):
            target._insert(key, None, adopt_key=False)


def intersection(out: HashSet | None, a: HashSet | None, b: HashSet | None) -> Status:
    """Fill *out* with the keys of *a* that are also in *b*."""
    return _run("intersection", _fill_intersection, out, a, b)


def union(out: HashSet | None, a: HashSet | None, b: HashSet | None) -> Status:
    """Fill *out* with every key of *a*, then the keys of *b* not yet present."""
    return _run("union", _fill_union, out, a, b)


def difference(out: HashSet | None, a: HashSet | None, b: HashSet | None) -> Status:
    """Fill *out* with the keys of *a* that are not in *b*."""
    return _run("difference", _fill_difference, out, a, b)


def subset(a: HashSet | None, b: HashSet | None) -> bool:
    if a is None or b is None:
        return False
    if a.size() > b.size():
        return False
    return all(b.contains(key) for key in a.table.keys())


def equal(a: HashSet | None, b: HashSet | None) -> bool:
    if a is None or b is None:
        return False
    if a is b:
        return True
    return a.size() == b.size() and subset(a, b)
