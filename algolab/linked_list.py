"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list with head and tail references.

    ``insert_after`` counts nodes from 0; ``get``, ``update`` and
    ``delete_after`` count them from 1.
    """

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, offset: int) -> _Node:
        node = self._head
        for _ in range(offset):
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def prepend(self, value: Any) -> None:
        """Add a value at the front of the list."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def insert_after(self, index: int, value: Any) -> None:
        """Insert a value after the node at zero-based ``index``."""
        if not 0 <= index < self._length:
            raise IndexError(f"cannot insert after index {index} in a list of {self._length}")
        node = self._node_at(index)
        node.next = _Node(value, node.next)
        if node is self._tail:
            self._tail = node.next
        self._length += 1

    def delete_after(self, position: int) -> Any:
        """Remove and return the node following the one at 1-based ``position``."""
        if not 1 <= position < self._length:
            raise IndexError(f"no node follows position {position} in a list of {self._length}")
        node = self._node_at(position - 1)
        removed = node.next
        node.next = removed.next
        if removed is self._tail:
            self._tail = node
        self._length -= 1
        return removed.value

    def update(self, position: int, value: Any) -> None:
        """Replace the value at 1-based ``position``."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} is outside 1..{self._length}")
        self._node_at(position - 1).value = value

    def get(self, position: int) -> Any:
        """Return the value at 1-based ``position``."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} is outside 1..{self._length}")
        return self._node_at(position - 1).value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def reversed(self) -> LinkedList:
        """Return a new list holding the values in reverse order."""
        result = LinkedList()
        for value in self:
            result.prepend(value)
        return result