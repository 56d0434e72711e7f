"""Classic comparison and counting sorts.

Every sort takes any iterable and returns a new sorted list, leaving the
input untouched. ``partition`` is the one in-place helper: it rearranges a
slice of a mutable sequence around its first element.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, MutableSequence
from typing import Any

__all__ = [
    "insertion_sort",
    "shell_sort",
    "shell_sort_hibbard",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "partition",
    "quick_sort_lomuto_trace",
    "median_of_three_quick_sort",
    "bucket_sort",
]


def _insertion_sort_in_place(a: MutableSequence) -> None:
    for i in range(1, len(a)):
        current = a[i]
        j = i
        while j > 0 and a[j - 1] > current:
            a[j] = a[j - 1]
            j -= 1
        a[j] = current


def insertion_sort(items: Iterable) -> list:
    """Sort by shifting each element left into its place."""
    result = list(items)
    _insertion_sort_in_place(result)
    return result


def shell_sort(items: Iterable) -> list:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    result = list(items)
    n = len(result)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = result[i]
            j = i
            while j >= gap and current < result[j - gap]:
                result[j] = result[j - gap]
                j -= gap
            result[j] = current
        gap //= 2
    return result


def shell_sort_hibbard(items: Iterable) -> list:
    """Shell sort with gaps of the form 2**k - 1, shrunk by integer division by 3.

    The gap sequence starts at the largest 2**k - 1 reached while the gap is
    below n/2 and is divided by three (rounding down) after each pass. That
    sequence does not always end on a gap of 1, so for some lengths the
    result is only gap-sorted rather than fully sorted.
    """
    result = list(items)
    n = len(result)
    gap = 1
    while gap < n // 2:
        gap = gap * 2 + 1
    while gap > 0:
        for i in range(gap, n):
            j = i
            while j >= gap and result[j] < result[j - gap]:
                result[j], result[j - gap] = result[j - gap], result[j]
                j -= gap
        gap //= 3
    return result


def _sift_down(a: MutableSequence, i: int, n: int) -> None:
    value = a[i]
    while 2 * i + 1 < n:
        child = 2 * i + 1
        if child != n - 1 and a[child + 1] > a[child]:
            child += 1
        if value < a[child]:
            a[i] = a[child]
            i = child
        else:
            break
    a[i] = value


def heap_sort(items: Iterable) -> list:
    """Sort with an in-place max-heap rooted at index 0."""
    result = list(items)
    n = len(result)
    if n < 2:
        return result
    for i in range(n // 2, -1, -1):
        _sift_down(result, i, n)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end)
    return result


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable) -> list:
    """Top-down two-way merge sort; equal elements keep their order."""
    result = list(items)
    if len(result) < 2:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def quick_sort(items: Iterable) -> list:
    """Quick sort taking the leftmost element of each range as pivot."""
    a = list(items)
    pending = [(0, len(a) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = a[left]
        i, j = left, right
        while i != j:
            while a[j] >= pivot and i < j:
                j -= 1
            while a[i] <= pivot and i < j:
                i += 1
            if i < j:
                a[i], a[j] = a[j], a[i]
        a[left] = a[i]
        a[i] = pivot
        pending.append((left, i - 1))
        pending.append((i + 1, right))
    return a


def _partition(a: MutableSequence, low: int, high: int, trace: list | None) -> int:
    pivot = a[low]
    while low < high:
        while low < high and a[high] >= pivot:
            high -= 1
        a[low] = a[high]
        if trace is not None:
            trace.append(list(a))
        while low < high and a[low] <= pivot:
            low += 1
        a[high] = a[low]
        if trace is not None:
            trace.append(list(a))
    a[low] = pivot
    if trace is not None:
        trace.append(list(a))
    return low


def partition(items: MutableSequence, low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around ``items[low]``.

    Returns the final index of the pivot: everything before it within the
    range is not greater, everything after it is not smaller.
    """
    if not 0 <= low <= high < len(items):
        raise IndexError(f"invalid range [{low}, {high}] for length {len(items)}")
    return _partition(items, low, high, None)


def quick_sort_lomuto_trace(items: Iterable) -> tuple[list, list[list]]:
    """Quick sort that records the whole list after every partition step.

    Returns the sorted list and the snapshots taken while sorting.
    """
    a = list(items)
    trace: list[list] = []
    pending = [(0, len(a) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            position = _partition(a, low, high, trace)
            pending.append((position + 1, high))
            pending.append((low, position - 1))
    return a, trace


def _median_of_three(a: MutableSequence, left: int, right: int) -> Any:
    mid = (left + right) // 2
    if a[left] > a[mid]:
        a[left], a[mid] = a[mid], a[left]
    if a[left] > a[right]:
        a[left], a[right] = a[right], a[left]
    if a[mid] > a[right]:
        a[mid], a[right] = a[right], a[mid]
    a[mid], a[right - 1] = a[right - 1], a[mid]
    return a[right - 1]


def median_of_three_quick_sort(items: Iterable, cutoff: int = 3) -> list:
    """Quick sort with median-of-three pivots; ranges shorter than the
    cutoff are finished with insertion sort."""
    if cutoff < 2:
        raise ValueError("cutoff must be at least 2")
    a = list(items)
    pending = [(0, len(a) - 1)]
    while pending:
        left, right = pending.pop()
        if left + cutoff <= right:
            pivot = _median_of_three(a, left, right)
            i, j = left, right - 1
            while True:
                i += 1
                while a[i] < pivot:
                    i += 1
                j -= 1
                while a[j] > pivot:
                    j -= 1
                if i < j:
                    a[i], a[j] = a[j], a[i]
                else:
                    break
            a[i], a[right - 1] = a[right - 1], a[i]
            pending.append((left, i - 1))
            pending.append((i + 1, right))
        elif left < right:
            segment = a[left:right + 1]
            _insertion_sort_in_place(segment)
            a[left:right + 1] = segment
    return a


def bucket_sort(values: Iterable[int], max_value: int = 1000) -> list[int]:
    """Counting sort for integers in the range 0..max_value inclusive."""
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    counts = [0] * (max_value + 1)
    for value in values:
        number = operator.index(value)
        if not 0 <= number <= max_value:
            raise ValueError(f"{number} is outside 0..{max_value}")
        counts[number] += 1
    return [number for number, count in enumerate(counts) for _ in range(count)]