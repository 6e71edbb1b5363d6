"""Array drills: two/three sum, merging, de-duplication and sliding windows."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import groupby, islice


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values from ``nums`` that sums to zero.

    Each triplet is in ascending order, and the triplets come out in ascending
    order of their first, then second element.
    """
    ordered = sorted(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        lo, hi = i + 1, len(ordered) - 1
        while lo < hi:
            total = first + ordered[lo] + ordered[hi]
            if total == 0:
                triplets.append([first, ordered[lo], ordered[hi]])
                lo += 1
                hi -= 1
                while lo < hi and ordered[lo] == ordered[lo - 1]:
                    lo += 1
            elif total < 0:
                lo += 1
            else:
                hi -= 1
    return triplets


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Find two entries of a sorted sequence adding up to ``target``.

    Uses two converging pointers. Returns the 1-based positions ``[i, j]``
    with ``i < j``, or an empty list if no pair exists.
    """
    lo, hi = 0, len(numbers) - 1
    while lo < hi:
        total = numbers[lo] + numbers[hi]
        if total == target:
            return [lo + 1, hi + 1]
        if total < target:
            lo += 1
        else:
            hi -= 1
    return []


def two_sum_hashed(numbers: Sequence[int], target: int) -> list[int]:
    """Find two entries adding up to ``target`` using a value-to-position map.

    Returns 1-based positions, or an empty list if no pair exists.
    """
    last_position = {value: index for index, value in enumerate(numbers)}
    for index, value in enumerate(numbers):
        other = last_position.get(target - value)
        if other is not None and other != index:
            return [index + 1, other + 1]
    return []


def two_sum_brute(numbers: Sequence[int], target: int) -> list[int]:
    """Find the first pair adding up to ``target`` by checking every pair.

    Returns 1-based positions, or an empty list if no pair exists.
    """
    for i, first in enumerate(numbers):
        for j, second in enumerate(numbers[i + 1:], start=i + 1):
            if first + second == target:
                return [i + 1, j + 1]
    return []


def merge_sorted(
    nums1: Sequence[int], m: int, nums2: Sequence[int], n: int
) -> list[int]:
    """Merge the first ``m`` items of ``nums1`` with the first ``n`` of ``nums2``.

    Both prefixes must already be sorted. The result has the length of
    ``nums1``; slots of ``nums1`` beyond ``m + n`` are carried over unchanged.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 must have room for m + n elements")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n elements")
    merged = list(heapq.merge(nums1[:m], nums2[:n]))
    merged.extend(nums1[m + n:])
    return merged


def remove_duplicates(nums: Sequence[int]) -> list[int]:
    """Collapse runs of equal values in a sorted sequence to a single value."""
    return [value for value, _ in groupby(nums)]


def remove_duplicates_at_most_twice(nums: Sequence[int]) -> list[int]:
    """Keep at most two copies of each run of equal values in a sorted sequence."""
    kept: list[int] = []
    for _, run in groupby(nums):
        kept.extend(islice(run, 2))
    return kept


def unique_sorted(nums: Sequence[int]) -> list[int]:
    """Return the distinct values of ``nums`` in ascending order."""
    return sorted(set(nums))


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run whose sum is at least ``target``.

    ``nums`` is expected to hold positive integers. Returns 0 if no run
    reaches the target.
    """
    best: int | None = None
    window_sum = 0
    left = 0
    for right, value in enumerate(nums):
        window_sum += value
        while window_sum >= target and left <= right:
            width = right - left + 1
            if best is None or width < best:
                best = width
            window_sum -= nums[left]
            left += 1
    return 0 if best is None else best