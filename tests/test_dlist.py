"""
DList: doubly linked list with node-relative insertion and removal.
"""

import pytest

from collection.dlist import DList
from collection.exceptions import EmptyContainerError, InvalidArgumentError


def test_first_insert_relative_to_none():
    d = DList()
    node = d.insert_after(None, "a")
    assert d.head is node and d.tail is node
    with pytest.raises(InvalidArgumentError):
        d.insert_after(None, "b")
    with pytest.raises(InvalidArgumentError):
        d.insert_before(None, "b")

    other = DList()
    other.insert_before(None, "z")
    assert list(other) == ["z"]


def test_insert_before_and_after():
    d = DList()
    b = d.push_back("b")
    d.insert_before(b, "a")
    d.insert_after(b, "d")
    d.insert_before(d.tail, "c")
    assert list(d) == ["a", "b", "c", "d"]
    assert list(reversed(d)) == ["d", "c", "b", "a"]
    assert len(d) == 4


def test_remove_returns_data_and_relinks():
    d = DList()
    nodes = [d.push_back(i) for i in range(5)]
    assert d.remove(nodes[2]) == 2
    assert d.remove(nodes[0]) == 0
    assert d.remove(nodes[4]) == 4
    assert list(d) == [1, 3]
    assert d.head is nodes[1] and d.tail is nodes[3]
    assert nodes[1].next is nodes[3] and nodes[3].prev is nodes[1]
    with pytest.raises(InvalidArgumentError):
        d.remove(None)


def test_pops():
    d = DList()
    for i in range(3):
        d.push_front(i)
    assert d.pop_front() == 2
    assert d.pop_back() == 0
    assert d.pop_back() == 1
    assert d.empty()
    assert d.head is None and d.tail is None
    with pytest.raises(EmptyContainerError):
        d.pop_front()
    with pytest.raises(EmptyContainerError):
        d.pop_back()


def test_clear_runs_destructor(destroy_value):
    d = DList(destroy_value)
    for i in range(4):
        d.push_back(i)
    d.pop_back()
    d.clear()
    assert destroy_value.calls == [0, 1, 2]
    d.destroy()
    assert destroy_value.count == 3
