"""An unbalanced binary search tree."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["BinarySearchTree", "main"]


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def insert(self, value: Any) -> None:
        """Add a value; a value already present is left alone."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def _find_node(self, value: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def find(self, value: Any) -> Any:
        """Return the stored value equal to ``value``, or None."""
        node = self._find_node(value)
        return None if node is None else node.value

    def __contains__(self, value: Any) -> bool:
        return self._find_node(value) is not None

    def min(self) -> Any:
        """Return the smallest value."""
        if self._root is None:
            raise ValueError("min of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Any:
        """Return the largest value."""
        if self._root is None:
            raise ValueError("max of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def delete(self, value: Any) -> None:
        """Remove a value; a node with two children takes its successor's value."""
        parent = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def preorder(self) -> list:
        """Values in node, left, right order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list:
        """Values in ascending order."""
        result = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list:
        """Values in left, right, node order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def leaves(self) -> list:
        """Values of nodes without children, from left to right."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.left is None and node.right is None:
                result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def height(self) -> int:
        """Number of levels: 0 for an empty tree, 1 for a single node."""
        levels = 0
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return levels

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, one space per level."""
        lines = []
        stack: list[tuple[_Node, int]] = []
        node, depth = self._root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.right, depth + 1
            node, depth = stack.pop()
            lines.append(f"{' ' * depth}{node.value}\n")
            node, depth = node.left, depth + 1
        return "".join(lines)

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._size = 0


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
    """Read a count and that many integers from stdin; print them in order."""
    try:
        values = _read_counted_ints(sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    tree = BinarySearchTree(values)
    for value in tree.inorder():
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())