"""Binary min- and max-heaps stored in a flat list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["MinHeap", "MaxHeap", "drain"]


class _BinaryHeap:
    """Array-backed binary heap; subclasses decide which element ranks first."""

    def __init__(self, values: Iterable = (), capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list = []
        self.capacity = capacity
        for value in values:
            self._push(value)

    @staticmethod
    def _before(a: Any, b: Any) -> bool:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _push(self, value: Any) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise OverflowError("heap is full")
        items = self._items
        items.append(value)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if not self._before(items[i], items[parent]):
                break
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def _peek(self) -> Any:
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def _pop(self) -> Any:
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def _sift_down(self, i: int) -> None:
        items = self._items
        n = len(items)
        while True:
            child = 2 * i + 1
            if child >= n:
                return
            if child + 1 < n and self._before(items[child + 1], items[child]):
                child += 1
            if not self._before(items[child], items[i]):
                return
            items[i], items[child] = items[child], items[i]
            i = child


class MinHeap(_BinaryHeap):
    """Heap whose top is always the smallest value."""

    @staticmethod
    def _before(a: Any, b: Any) -> bool:
        return a < b

    def push(self, value: Any) -> None:
        """Add a value, moving it up past any larger parent."""
        self._push(value)

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        return self._pop()

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        return self._peek()

    def __len__(self) -> int:
        return len(self._items)


class MaxHeap(_BinaryHeap):
    """Heap whose top is always the largest value."""

    @staticmethod
    def _before(a: Any, b: Any) -> bool:
        return a > b

    def push(self, value: Any) -> None:
        """Add a value, moving it up past any smaller parent."""
        self._push(value)

    def pop(self) -> Any:
        """Remove and return the largest value."""
        return self._pop()

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        return self._peek()

    def __len__(self) -> int:
        return len(self._items)


def drain(heap: _BinaryHeap) -> Iterator:
    """Pop values from the heap until it is empty, yielding each in turn."""
    while heap:
        yield heap.pop()