"""Largest sum of a contiguous run of values."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate, chain

__all__ = ["max_subsequence_sum", "max_subsequence_sum_brute"]


def max_subsequence_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run in linear time.

    The empty run counts, so the result is never below zero.
    """
    best = current = 0
    for value in values:
        current += value
        if current > best:
            best = current
        elif current < 0:
            current = 0
    return best


def max_subsequence_sum_brute(values: Iterable[int]) -> int:
    """Same result as :func:`max_subsequence_sum`, trying every run."""
    items = list(values)
    runs = (accumulate(items[start:]) for start in range(len(items)))
    return max(chain([0], *runs))