"""Small exercise problems on strings, digits and grids."""

from __future__ import annotations

import bisect
from collections.abc import Iterable

__all__ = [
    "dna_mismatches",
    "count_char_ignoring_case",
    "digit_sum_pinyin",
    "fibonacci",
    "fibonacci_distance",
    "find_words",
    "format_homework",
]

_PAIRS = frozenset({("A", "T"), ("T", "A"), ("C", "G"), ("G", "C")})

_PINYIN = ("ling", "yi", "er", "san", "si", "wu", "liu", "qi", "ba", "jiu")

_DIGITS = frozenset("0123456789")

# Word, then the row and column step from one letter to the next.
_WORDS = (("this", (0, 1)), ("two", (1, 0)), ("fat", (-1, 1)))


def dna_mismatches(first: str, second: str) -> int:
    """Number of positions where two base strands do not pair (A-T, C-G)."""
    if len(first) != len(second):
        raise ValueError("strands must have the same length")
    return sum(1 for pair in zip(first, second) if pair not in _PAIRS)


def count_char_ignoring_case(text: str, char: str) -> int:
    """Count characters equal to ``char`` or exactly 32 code points away from it.

    For ASCII letters this is a case-insensitive count.
    """
    if len(char) != 1:
        raise ValueError("char must be a single character")
    target = ord(char)
    return sum(1 for c in text if abs(ord(c) - target) in (0, 32))


def digit_sum_pinyin(number: str) -> str:
    """Spell each digit of the digit sum of ``number`` in pinyin.

    A sum of zero gives an empty string.
    """
    number = number.strip()
    if not number or not set(number) <= _DIGITS:
        raise ValueError(f"not a natural number: {number!r}")
    total = sum(int(digit) for digit in number)
    if total == 0:
        return ""
    return " ".join(_PINYIN[int(digit)] for digit in str(total))


def fibonacci(n: int) -> int:
    """Fibonacci number with fibonacci(1) == fibonacci(2) == 1; any n <= 2 gives 1."""
    if n <= 2:
        return 1
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


_FIBONACCI_TABLE = tuple(fibonacci(n) for n in range(1, 31))


def fibonacci_distance(num: int) -> int:
    """Smallest step count to turn ``num`` into one of the first 30 Fibonacci numbers."""
    table = _FIBONACCI_TABLE
    if num >= table[-1]:
        return num - table[-1]
    if num <= table[0]:
        return table[0] - num
    upper = bisect.bisect_left(table, num)
    if table[upper] == num:
        return 0
    return min(num - table[upper - 1], table[upper] - num)


def find_words(grid: Iterable[str] | str) -> list[tuple[str, tuple[tuple[int, int], ...]]]:
    """Find "this" left to right, "two" downwards and "fat" diagonally upwards.

    ``grid`` is a sequence of rows or one string with a row per line;
    whitespace inside a row is ignored. Each match is the word and the
    (row, column) of each of its letters, in scan order.
    """
    if isinstance(grid, str):
        grid = grid.splitlines()
    rows = [row for row in ("".join(line.split()) for line in grid) if row]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    height = len(rows)
    matches = []
    for r, row in enumerate(rows):
        for c in range(width):
            for word, (dr, dc) in _WORDS:
                cells = tuple((r + dr * k, c + dc * k) for k in range(len(word)))
                if all(
                    0 <= y < height and 0 <= x < width and rows[y][x] == letter
                    for (y, x), letter in zip(cells, word)
                ):
                    matches.append((word, cells))
    return matches


def format_homework(name: str, student_id: str, class_name: str, answer: str) -> str:
    """Header line with the student's details, then the answer with '@' as line break."""
    body = answer.replace("@", "\n")
    return f"\n姓名: {name} 学号: {student_id} 班级: {class_name}\n{body}\n"