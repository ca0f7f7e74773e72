"""sort.py - In-place comparison sorts over mutable sequences.

Every sort takes a three-way ``compare(a, b)`` callback (negative, zero or
positive, like C's ``qsort``) and returns a ``Status``. ``None`` data or a
missing comparator fails; empty and single-element inputs succeed
untouched.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from .constants import Status

Compare = Callable[[Any, Any], int]


def _swap(data: MutableSequence[Any], i: int, j: int) -> None:
    if i != j:
        data[i], data[j] = data[j], data[i]


def _guard(data: MutableSequence[Any] | None, compare: Compare | None) -> bool:
    return data is not None and compare is not None


def sort_insertion(data: MutableSequence[Any], compare: Compare) -> Status:
    if not _guard(data, compare):
        return Status.FAIL
    for i in range(1, len(data)):
        j = i
        while j > 0 and compare(data[j - 1], data[j]) > 0:
            _swap(data, j - 1, j)
            j -= 1
    return Status.OK


def sort_selection(data: MutableSequence[Any], compare: Compare) -> Status:
    if not _guard(data, compare):
        return Status.FAIL
    n = len(data)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if compare(data[j], data[min_index]) < 0:
                min_index = j
        _swap(data, i, min_index)
    return Status.OK


def sort_bubble(data: MutableSequence[Any], compare: Compare) -> Status:
    if not _guard(data, compare):
        return Status.FAIL
    n = len(data)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if compare(data[j], data[j + 1]) > 0:
                _swap(data, j, j + 1)
                swapped = True
        if not swapped:
            break
    return Status.OK


def _partition(data: MutableSequence[Any], low: int, high: int, compare: Compare) -> int:
    """Median-of-three partition of ``data[low..high]`` (at least 3 items)."""
    mid = low + (high - low) // 2
    if compare(data[low], data[mid]) > 0:
        _swap(data, low, mid)
    if compare(data[mid], data[high]) > 0:
        _swap(data, mid, high)
    if compare(data[low], data[mid]) > 0:
        _swap(data, low, mid)

    # park the pivot next to the (already larger) high sentinel
    pivot = high - 1
    _swap(data, mid, pivot)
    left, right = low + 1, high - 2
    while True:
        while compare(data[left], data[pivot]) < 0:
            left += 1
        while right > low and compare(data[right], data[pivot]) > 0:
            right -= 1
        if left >= right:
            break
        _swap(data, left, right)
        left += 1
        right -= 1
    _swap(data, left, pivot)
    return left


def _quick(data: MutableSequence[Any], low: int, high: int, compare: Compare) -> None:
    # recurse into the smaller side, loop over the larger one
    while high - low + 1 >= 3:
        p = _partition(data, low, high, compare)
        if p - low < high - p:
            _quick(data, low, p - 1, compare)
            low = p + 1
        else:
            _quick(data, p + 1, high, compare)
            high = p - 1
    if high - low + 1 == 2 and compare(data[low], data[high]) > 0:
        _swap(data, low, high)


def sort_quick(data: MutableSequence[Any], compare: Compare) -> Status:
    if not _guard(data, compare):
        return Status.FAIL
    if len(data) > 1:
        _quick(data, 0, len(data) - 1, compare)
    return Status.OK


def _merge(left: list[Any], right: list[Any], compare: Compare) -> list[Any]:
    out: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # take from the left on ties so the sort is stable
        if compare(right[j], left[i]) < 0:
            out.append(right[j])
            j += 1
        else:
            out.append(left[i])
            i += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def _merge_sort(items: list[Any], compare: Compare) -> list[Any]:
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(_merge_sort(items[:mid], compare), _merge_sort(items[mid:], compare), compare)


def sort_merge(data: MutableSequence[Any], compare: Compare) -> Status:
    if not _guard(data, compare):
        return Status.FAIL
    if len(data) > 1:
        merged = _merge_sort(list(data), compare)
        for i, item in enumerate(merged):
            data[i] = item
    return Status.OK
