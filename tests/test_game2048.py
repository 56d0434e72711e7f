import pytest

from algolab.game2048 import Board, Direction, key_to_direction

EMPTY = [[0] * 4 for _ in range(4)]


def _transpose(cells):
    return [list(column) for column in zip(*cells)]


def _mirror(cells):
    return [list(reversed(row)) for row in cells]


SAMPLE = [
    [2, 2, 2, 2],
    [4, 0, 4, 8],
    [0, 2, 0, 2],
    [8, 8, 16, 0],
]


def test_left_merges_pairs_once():
    board = Board([[2, 2, 2, 2], [0] * 4, [0] * 4, [0] * 4])
    assert board.move(Direction.LEFT) is True
    assert board.cells[0] == (4, 4, 0, 0)


def test_merged_tile_does_not_merge_again():
    board = Board([[4, 4, 8, 0], [0] * 4, [0] * 4, [0] * 4])
    board.move(Direction.LEFT)
    assert board.cells[0] == (8, 8, 0, 0)


@pytest.mark.parametrize("direction", list(Direction))
def test_move_preserves_total(direction):
    board = Board(SAMPLE)
    board.move(direction)
    assert sum(map(sum, board.cells)) == sum(map(sum, SAMPLE))


def test_up_is_left_on_transposed_board():
    up = Board(SAMPLE)
    up.move(Direction.UP)
    left = Board(_transpose(SAMPLE))
    left.move(Direction.LEFT)
    assert [list(r) for r in up.cells] == _transpose([list(r) for r in left.cells])


def test_right_is_left_on_mirrored_board():
    right = Board(SAMPLE)
    right.move(Direction.RIGHT)
    left = Board(_mirror(SAMPLE))
    left.move(Direction.LEFT)
    assert [list(r) for r in right.cells] == _mirror([list(r) for r in left.cells])


def test_down_is_up_on_flipped_board():
    down = Board(SAMPLE)
    down.move(Direction.DOWN)
    up = Board(list(reversed(SAMPLE)))
    up.move(Direction.UP)
    assert [list(r) for r in down.cells] == list(reversed([list(r) for r in up.cells]))


def test_blocked_move_reports_no_change():
    cells = [[2, 4, 0, 0], [8, 0, 0, 0], [0] * 4, [0] * 4]
    board = Board(cells)
    assert board.move(Direction.LEFT) is False
    assert [list(r) for r in board.cells] == cells


def test_new_board_has_single_two():
    board = Board(seed=7)
    tiles = [v for row in board.cells for v in row if v]
    assert tiles == [2]
    assert board.empty == 15


def test_spawn_adds_two_or_four_on_empty_cell():
    board = Board(SAMPLE, seed=3)
    before = board.empty
    row, column, value = board.spawn()
    assert SAMPLE[row][column] == 0
    assert board.cells[row][column] == value
    assert value in (2, 4)
    assert board.empty == before - 1


def test_spawn_is_reproducible_with_seed():
    first = Board(EMPTY, seed=11)
    second = Board(EMPTY, seed=11)
    assert [first.spawn() for _ in range(5)] == [second.spawn() for _ in range(5)]


def test_spawn_on_full_board_raises():
    board = Board([[2, 4, 2, 4]] * 4)
    assert board.full is True
    with pytest.raises(ValueError):
        board.spawn()


def test_free_neighbours_of_full_board_is_one():
    board = Board([[2, 4, 2, 4]] * 4)
    assert board.free_neighbours(1, 1) == 1


def test_filling_a_neighbour_lowers_count():
    empty = Board(EMPTY)
    cells = [row[:] for row in EMPTY]
    cells[2][2] = 2
    filled = Board(cells)
    assert filled.free_neighbours(1, 1) == empty.free_neighbours(1, 1) - 1


def test_cell_above_in_top_row_is_not_counted():
    empty = Board(EMPTY)
    cells = [row[:] for row in EMPTY]
    cells[0][1] = 2
    filled = Board(cells)
    assert filled.free_neighbours(1, 1) == empty.free_neighbours(1, 1)


def test_free_neighbours_off_board_raises():
    with pytest.raises(IndexError):
        Board(EMPTY).free_neighbours(4, 0)


def test_render_frame():
    cells = [row[:] for row in EMPTY]
    cells[0][0] = 2048
    lines = Board(cells).render().splitlines()
    assert len(lines) == 9
    assert lines[0] == "-" * 21
    assert lines[-1] == "-" * 21
    assert all(len(line) == 21 for line in lines)
    assert lines[1][1:5] == "2048"


@pytest.mark.parametrize(
    ("key", "direction"),
    [
        ("a", Direction.LEFT), ("h", Direction.LEFT), (68, Direction.LEFT),
        ("d", Direction.RIGHT), ("l", Direction.RIGHT), (67, Direction.RIGHT),
        ("w", Direction.UP), ("k", Direction.UP), (65, Direction.UP),
        ("s", Direction.DOWN), ("j", Direction.DOWN), (66, Direction.DOWN),
    ],
)
def test_key_to_direction(key, direction):
    assert key_to_direction(key) is direction


def test_unknown_key_gives_none():
    assert key_to_direction("x") is None


def test_wrong_board_shape_raises():
    with pytest.raises(ValueError):
        Board([[0, 0, 0], [0, 0, 0], [0, 0, 0]])