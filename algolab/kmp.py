"""Knuth-Morris-Pratt substring search with three styles of jump table."""

from __future__ import annotations

import sys
from collections.abc import Sequence

__all__ = [
    "prefix_table",
    "failure_table",
    "optimized_next",
    "kmp_search",
    "kmp_search_failure",
    "kmp_search_optimized",
    "main",
]


def prefix_table(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for every prefix length.

    ``table[n]`` describes the first ``n`` characters of the pattern, so the
    table has ``len(pattern) + 1`` entries and starts with ``0``.
    """
    table = [0] * (len(pattern) + 1)
    j = 0
    for i in range(1, len(pattern)):
        while j > 0 and pattern[i] != pattern[j]:
            j = table[j]
        if pattern[i] == pattern[j]:
            j += 1
        table[i + 1] = j
    return table


def failure_table(pattern: str) -> list[int]:
    """Index of the last character of the longest border ending at each position.

    ``-1`` means that no proper prefix ends there.
    """
    if not pattern:
        return []
    table = [-1] * len(pattern)
    k = -1
    for q in range(1, len(pattern)):
        while k > -1 and pattern[k + 1] != pattern[q]:
            k = table[k]
        if pattern[k + 1] == pattern[q]:
            k += 1
        table[q] = k
    return table


def optimized_next(pattern: str) -> list[int]:
    """Jump table that skips fall-backs landing on the same character again."""
    n = len(pattern)
    if n == 0:
        return []
    table = [-1] * n
    j, k = 0, -1
    while j < n - 1:
        if k == -1 or pattern[j] == pattern[k]:
            j += 1
            k += 1
            table[j] = table[k] if pattern[j] == pattern[k] else k
        else:
            k = table[k]
    return table


def kmp_search(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1."""
    if not pattern:
        return 0
    table = prefix_table(pattern)
    j = 0
    for i, char in enumerate(text):
        while j > 0 and char != pattern[j]:
            j = table[j]
        if char == pattern[j]:
            j += 1
        if j == len(pattern):
            return i - j + 1
    return -1


def kmp_search_failure(text: str, pattern: str) -> int:
    """Search driven by :func:`failure_table`; returns the first index or -1."""
    if not pattern:
        return 0
    table = failure_table(pattern)
    last = len(pattern) - 1
    k = -1
    for i, char in enumerate(text):
        while k > -1 and pattern[k + 1] != char:
            k = table[k]
        if pattern[k + 1] == char:
            k += 1
        if k == last:
            return i - last
    return -1


def kmp_search_optimized(text: str, pattern: str) -> int:
    """Search driven by :func:`optimized_next`; returns the first index or -1."""
    table = optimized_next(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - j if j == len(pattern) else -1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the prefix table of a pattern and where it first occurs in a text."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        args = sys.stdin.read().split()
    if len(args) != 2:
        print("usage: kmp TEXT PATTERN", file=sys.stderr)
        return 2
    text, pattern = args
    for index, value in enumerate(prefix_table(pattern)):
        print(f"next[{index}] = {value}")
    print(f"first match index: {kmp_search(text, pattern)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())