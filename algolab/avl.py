"""A self-balancing AVL tree."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

__all__ = ["AVLTree", "main"]


class _Node:
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_with_left(k3: _Node) -> _Node:
    k2 = k3.left
    k3.left = k2.right
    k2.right = k3
    _update(k3)
    _update(k2)
    return k2


def _rotate_with_right(k3: _Node) -> _Node:
    k2 = k3.right
    k3.right = k2.left
    k2.left = k3
    _update(k3)
    _update(k2)
    return k2


def _double_with_left(k3: _Node) -> _Node:
    k3.left = _rotate_with_right(k3.left)
    return _rotate_with_left(k3)


def _double_with_right(k3: _Node) -> _Node:
    k3.right = _rotate_with_left(k3.right)
    return _rotate_with_right(k3)


def _rebalance(node: _Node) -> _Node:
    _update(node)
    if _height(node.left) - _height(node.right) >= 2:
        if _height(node.left.left) >= _height(node.left.right):
            return _rotate_with_left(node)
        return _double_with_left(node)
    if _height(node.right) - _height(node.left) >= 2:
        if _height(node.right.right) >= _height(node.right.left):
            return _rotate_with_right(node)
        return _double_with_right(node)
    return node


def _insert(node: _Node | None, value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _Node, value: Any) -> _Node | None:
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is not None and node.right is not None:
        successor = _min_node(node.right).value
        node.value = successor
        node.right = _delete(node.right, successor)
    else:
        node = node.left if node.left is not None else node.right
        if node is None:
            return None
    return _rebalance(node)


class AVLTree:
    """Height-balanced binary search tree; duplicates are ignored.

    Heights count edges: a single node has height 0, an empty tree -1.
    """

    def __init__(self, values: Iterable = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def insert(self, value: Any) -> None:
        """Add a value, rotating to keep the tree balanced."""
        if value in self:
            return
        self._root = _insert(self._root, value)
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove a value, rotating to keep the tree balanced."""
        if self._root is None:
            raise KeyError(f"{value!r}: tree is empty")
        if value not in self:
            raise KeyError(value)
        self._root = _delete(self._root, value)
        self._size -= 1

    def min(self) -> Any:
        """Return the smallest value."""
        if self._root is None:
            raise ValueError("min of an empty tree")
        return _min_node(self._root).value

    def max(self) -> Any:
        """Return the largest value."""
        if self._root is None:
            raise ValueError("max of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        """Height of the root."""
        return _height(self._root)

    def _walk(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def inorder(self) -> list:
        """Values in ascending order."""
        return [node.value for node in self._walk()]

    def inorder_with_heights(self) -> list[tuple[Any, int]]:
        """Pairs of value and node height, in ascending order of value."""
        return [(node.value, node.height) for node in self._walk()]


def _read_counted_ints(text: str) -> list[int]:
    tokens = text.split()
    if not tokens:
        raise ValueError("expected a count of values")
    count = int(tokens[0])
    values = [int(token) for token in tokens[1:1 + count]]
    if len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and integers from stdin; print each value with its height."""
    try:
        values = _read_counted_ints(sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    tree = AVLTree(values)
    for value, height in tree.inorder_with_heights():
        print(value, height)
    return 0


if __name__ == "__main__":
    sys.exit(main())