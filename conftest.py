import pytest

# Import collection modules lazily inside fixtures so that numpy is not
# initialised while pytest is still collecting.


class DestroyCounter:
    """Destructor callback that records every object it is handed."""

    def __init__(self):
        self.calls = []

    def __call__(self, obj):
        self.calls.append(obj)

    @property
    def count(self):
        return len(self.calls)

    def times(self, obj):
        """How many times *obj* itself (by identity) was destroyed."""
        return sum(1 for c in self.calls if c is obj)


@pytest.fixture
def destroy_key():
    return DestroyCounter()


@pytest.fixture
def destroy_value():
    return DestroyCounter()


@pytest.fixture
def table():
    from collection.chtbl import ChainedHashTable

    t = ChainedHashTable()
    try:
        yield t
    finally:
        t.destroy()


@pytest.fixture
def owning_table(destroy_key, destroy_value):
    """Table that owns its keys and values through counting destructors."""
    from collection.chtbl import ChainedHashTable

    t = ChainedHashTable(destroy_key=destroy_key, destroy_value=destroy_value)
    yield t
    t.destroy()


@pytest.fixture
def strict_config():
    from collection.config import TableConfig

    return TableConfig().with_strict()


@pytest.fixture
def make_set():
    """Factory for HashSets pre-filled with keys; destroyed after the test."""
    from collection.hashset import HashSet

    created = []

    def _make(*keys, destroy=None):
        s = HashSet(destroy=destroy)
        for key in keys:
            s.insert(key)
        created.append(s)
        return s

    try:
        yield _make
    finally:
        for s in created:
            s.destroy()


@pytest.fixture
def make_counter():
    """Factory for extra DestroyCounters when one per role is not enough."""
    return DestroyCounter
