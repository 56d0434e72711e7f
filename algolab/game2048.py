"""The 2048 sliding-tile game on a 4x4 board."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Iterable, Sequence
from enum import Enum

__all__ = ["Direction", "Board", "key_to_direction", "main"]

SIZE = 4
_BORDER_WIDTH = 5 * SIZE + 1
_NEIGHBOURS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)
_QUIT_KEYS = frozenset({ord("q"), ord("Q")})


class Direction(Enum):
    """Direction in which the tiles slide."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Letters, vi keys and the final byte of the arrow-key escape sequences.
_KEYS = {
    **dict.fromkeys(map(ord, "ahD"), Direction.LEFT),
    **dict.fromkeys(map(ord, "dlC"), Direction.RIGHT),
    **dict.fromkeys(map(ord, "wkA"), Direction.UP),
    **dict.fromkeys(map(ord, "sjB"), Direction.DOWN),
}


def key_to_direction(key: str | int) -> Direction | None:
    """Map a key (a character or its code) to a direction, or None."""
    code = ord(key) if isinstance(key, str) else key
    return _KEYS.get(code)


def _collapse(line: list[int]) -> list[int]:
    """Merge equal neighbouring tiles towards the front once, then slide."""
    merged: list[int] = []
    pending: int | None = None
    for value in (v for v in line if v):
        if pending is None:
            pending = value
        elif pending == value:
            merged.append(pending + value)
            pending = None
        else:
            merged.append(pending)
            pending = value
    if pending is not None:
        merged.append(pending)
    return merged + [0] * (len(line) - len(merged))


class Board:
    """A 4x4 grid of tiles; 0 marks an empty cell."""

    def __init__(self, cells: Iterable[Iterable[int]] | None = None, *, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._last_spawn = (0, 0)
        if cells is None:
            self._cells = [[0] * SIZE for _ in range(SIZE)]
            self._cells[self._rng.randrange(SIZE)][self._rng.randrange(SIZE)] = 2
            return
        rows = [[int(value) for value in row] for row in cells]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"board must be {SIZE}x{SIZE}")
        if any(value < 0 for row in rows for value in row):
            raise ValueError("tile values must not be negative")
        self._cells = rows

    @property
    def cells(self) -> tuple[tuple[int, ...], ...]:
        """The tiles, row by row."""
        return tuple(tuple(row) for row in self._cells)

    @property
    def empty(self) -> int:
        """Number of empty cells."""
        return sum(1 for row in self._cells for value in row if not value)

    @property
    def full(self) -> bool:
        """True when no cell is empty."""
        return self.empty == 0

    @staticmethod
    def _lines(direction: Direction) -> list[list[tuple[int, int]]]:
        forward = range(SIZE)
        backward = range(SIZE - 1, -1, -1)
        if direction is Direction.LEFT:
            return [[(r, c) for c in forward] for r in forward]
        if direction is Direction.RIGHT:
            return [[(r, c) for c in backward] for r in forward]
        if direction is Direction.UP:
            return [[(r, c) for r in forward] for c in forward]
        return [[(r, c) for r in backward] for c in forward]

    def move(self, direction: Direction) -> bool:
        """Slide and merge every tile in ``direction``; True if anything changed."""
        changed = False
        for coords in self._lines(Direction(direction)):
            values = [self._cells[r][c] for r, c in coords]
            collapsed = _collapse(values)
            if collapsed != values:
                changed = True
                for (r, c), value in zip(coords, collapsed):
                    self._cells[r][c] = value
        return changed

    def free_neighbours(self, row: int, column: int) -> int:
        """One plus the number of empty cells among the eight around a cell.

        The cell directly above is not counted when it lies in the top row.
        """
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise IndexError(f"cell ({row}, {column}) is off the board")
        count = 1
        for dr, dc in _NEIGHBOURS:
            r, c = row + dr, column + dc
            if (dr, dc) == (-1, 0) and r == 0:
                continue
            if 0 <= r < SIZE and 0 <= c < SIZE and not self._cells[r][c]:
                count += 1
        return count

    def spawn(self) -> tuple[int, int, int]:
        """Place a 2 or a 4 on an empty cell, preferring open surroundings.

        Returns the row, column and value of the new tile.
        """
        cells = self._cells
        free = [(r, c) for r, row in enumerate(cells) for c, value in enumerate(row) if not value]
        if not free:
            raise ValueError("board is full")
        row, column = self._rng.choice(free)
        best = self.free_neighbours(row, column)
        last_row, last_column = self._last_spawn
        for r in range(SIZE):
            for c in range(SIZE):
                if (
                    not cells[r][c]
                    and self.free_neighbours(r, c) > best
                    and r != last_row
                    and c != last_column
                ):
                    row, column = r, c
                    last_row, last_column = r, c
                    break
        self._last_spawn = (last_row, last_column)
        value = self._rng.choice((2, 4))
        cells[row][column] = value
        return row, column, value

    def render(self) -> str:
        """Draw the board as text framed with '-' and '|'."""
        border = "-" * _BORDER_WIDTH
        divider = "|" + "|".join(["----"] * SIZE) + "|"
        lines = [border]
        for index, row in enumerate(self._cells):
            lines.append("|" + "|".join(f"{v:>4}" if v else "    " for v in row) + "|")
            lines.append(border if index == SIZE - 1 else divider)
        return "\n".join(lines)


def _play(screen, board: Board) -> None:
    import curses

    try:
        curses.curs_set(0)
    except curses.error:
        pass

    def draw() -> None:
        screen.clear()
        for y, line in enumerate(board.render().splitlines()):
            screen.addstr(y, 0, line)
        screen.refresh()

    draw()
    while True:
        key = screen.getch()
        if key in _QUIT_KEYS:
            time.sleep(1)
            return
        direction = key_to_direction(key)
        if direction is None:
            continue
        changed = board.move(direction)
        if board.full:
            draw()
            time.sleep(1)
            return
        if changed:
            board.spawn()
        draw()


def main(argv: Sequence[str] | None = None) -> int:
    """Play 2048 in the terminal; q quits."""
    import curses

    parser = argparse.ArgumentParser(prog="game2048", description="Play 2048 in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    board = Board(seed=args.seed)

    def run(screen) -> None:
        curses.cbreak()
        curses.noecho()
        _play(screen, board)

    curses.wrapper(run)
    print(board.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())