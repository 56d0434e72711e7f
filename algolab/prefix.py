"""Infix to prefix conversion and prefix evaluation."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Sequence
from typing import Any

__all__ = ["BoundedStack", "to_prefix", "evaluate_prefix", "main"]

_MAX_SIZE = 99
_DIGITS = frozenset("0123456789")
_BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": math.pow,
}


class BoundedStack:
    """Last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 50) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, value: Any) -> None:
        """Put a value on top."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]


def _parse_number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"invalid number {token!r}") from None


def to_prefix(expression: str) -> str:
    """Convert an infix expression to space-separated prefix notation.

    Supports + - * / ^, parentheses, decimals and signed numbers. Whitespace
    in the input is ignored. Every operator groups from the left.
    """
    text = "".join(expression.split())
    output: list[str] = []
    symbols = BoundedStack(_MAX_SIZE)
    i = len(text) - 1
    while i >= 0:
        char = text[i]
        if char in _DIGITS:
            end = i
            while i >= 0 and (text[i] in _DIGITS or text[i] == "."):
                i -= 1
            if i >= 0 and text[i] in "+-" and (
                i == 0 or (text[i - 1] not in _DIGITS and text[i - 1] != ")")
            ):
                i -= 1
            token = text[i + 1:end + 1]
            _parse_number(token)
            output.append(token)
            continue
        if char == ")":
            symbols.push(char)
        elif char == "(":
            while True:
                if not symbols:
                    raise ValueError("unbalanced parentheses")
                top = symbols.pop()
                if top == ")":
                    break
                output.append(top)
        elif char in "+-":
            while symbols and symbols.peek() not in ")+-":
                output.append(symbols.pop())
            symbols.push(char)
        elif char in "*/":
            while symbols and symbols.peek() == "^":
                output.append(symbols.pop())
            symbols.push(char)
        elif char == "^":
            symbols.push(char)
        else:
            raise ValueError(f"unexpected character {char!r}")
        i -= 1
    while symbols:
        top = symbols.pop()
        if top == ")":
            raise ValueError("unbalanced parentheses")
        output.append(top)
    output.reverse()
    return " ".join(output)


def evaluate_prefix(expression: str) -> float:
    """Evaluate a space-separated prefix expression."""
    numbers = BoundedStack(_MAX_SIZE)
    for token in reversed(expression.split()):
        function = _BINARY.get(token)
        if function is None:
            numbers.push(_parse_number(token))
            continue
        if len(numbers) < 2:
            raise ValueError(f"operator {token!r} is missing an operand")
        left = numbers.pop()
        right = numbers.pop()
        numbers.push(function(left, right))
    if len(numbers) != 1:
        raise ValueError("expression does not reduce to a single value")
    return numbers.pop()


def _report(expression: str) -> None:
    prefix = to_prefix(expression)
    print(f"prefix: {prefix}")
    print(f"result: {evaluate_prefix(prefix):g}")


def _report_safely(expression: str) -> bool:
    try:
        _report(expression)
    except (ValueError, ArithmeticError) as error:
        print(f"error: {error}", file=sys.stderr)
        return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Convert and evaluate expressions from the arguments, or interactively."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        results = [_report_safely(expression) for expression in args]
        return 0 if all(results) else 1
    while True:
        try:
            expression = input("infix: ")
        except EOFError:
            return 0
        _report_safely(expression)
        try:
            answer = input("Continue (y/n)? ")
        except EOFError:
            return 0
        if answer.strip().lower() != "y":
            return 0


if __name__ == "__main__":
    sys.exit(main())