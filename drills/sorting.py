"""Sorting drills plus merge and subset checks over sorted ranges."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using bubble sort.

    Each pass bubbles the largest remaining item to the end. The loop stops
    early once a pass makes no swap.
    """
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j + 1] < result[j]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using selection sort.

    For each position, the smallest item after it is found and swapped in
    if it is smaller than the item already there.
    """
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i + 1, len(result)), key=result.__getitem__)
        if result[smallest] < result[i]:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using a stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def merge_sorted_sequences(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On ties the item from ``first`` comes out before the one from ``second``.
    """
    return list(heapq.merge(first, second))


def includes(haystack: Sequence[Any], needle: Sequence[Any]) -> bool:
    """Return whether sorted ``needle`` is a sub-multiset of sorted ``haystack``.

    Both sequences are walked once, in step, so they must be sorted in
    ascending order for the answer to be meaningful.
    """
    wanted = iter(needle)
    sentinel = object()
    target = next(wanted, sentinel)
    for value in haystack:
        if target is sentinel:
            return True
        if target < value:
            return False
        if not value < target:
            target = next(wanted, sentinel)
    return target is sentinel