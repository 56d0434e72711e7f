"""Ranking students by score."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Student", "rank_students", "average_score", "parse_students", "main"]


@dataclass(frozen=True)
class Student:
    """A student's number and score."""

    student_id: int
    score: int


def rank_students(students: Iterable[Student]) -> list[Student]:
    """Order students from the highest score down by selection with swaps.

    Students with equal scores do not necessarily keep their input order.
    """
    ranked = list(students)
    for i in range(len(ranked) - 1):
        k = max(range(i, len(ranked)), key=lambda j: ranked[j].score)
        if k != i:
            ranked[i], ranked[k] = ranked[k], ranked[i]
    return ranked


def average_score(students: Iterable[Student]) -> int:
    """Mean score, truncated towards zero."""
    scores = [student.score for student in students]
    if not scores:
        raise ValueError("average of no students")
    total = sum(scores)
    quotient = abs(total) // len(scores)
    return quotient if total >= 0 else -quotient


def parse_students(text: str) -> list[Student]:
    """Read whitespace-separated pairs of student number and score."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every student needs a number and a score")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as error:
        raise ValueError(f"not an integer: {error}") from None
    return [Student(sid, score) for sid, score in zip(numbers[::2], numbers[1::2])]


def main(argv: Sequence[str] | None = None) -> int:
    """Read students from a file or stdin; print them ranked and the average."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        text = Path(args[0]).read_text() if args else sys.stdin.read()
        students = parse_students(text)
        average = average_score(students)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for student in rank_students(students):
        print(f"{student.student_id},{student.score}")
    print(f"average score = {average}")
    return 0


if __name__ == "__main__":
    sys.exit(main())