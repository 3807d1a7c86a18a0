import pytest

from tetris_board import Board, Cell, collide


def test_new_board_is_empty_and_rectangular():
    board = Board(20, 10)
    assert len(board.cells) == 20
    assert all(len(row) == 10 for row in board.cells)
    assert board.filled_count() == 0


@pytest.mark.parametrize("rows,cols", [(0, 10), (20, 0), (-1, 5)])
def test_degenerate_dimensions_rejected(rows, cols):
    with pytest.raises(ValueError):
        Board(rows, cols)


def test_from_rows_rejects_ragged_input():
    with pytest.raises(ValueError):
        Board.from_rows(["....", "..."])


def test_buffer_zone_is_never_filled():
    board = Board.from_rows(["####", "####"])
    assert board.is_filled(0, 0)
    assert not board.is_filled(-1, 0)
    assert not board.is_filled(-4, 3)


def test_merge_fills_visible_cells_and_reports_buffer_cells():
    board = Board(4, 4)
    overflow = board.merge([(1, -1), (1, 0), (2, 0), (2, 1)])
    assert overflow == [(1, -1)]
    assert board.to_strings() == [".##.", "..#.", "....", "...."]


def test_clear_full_rows_none_full():
    board = Board.from_rows(["....", "#.#.", "###."])
    before = board.to_strings()
    assert board.clear_full_rows() == 0
    assert board.to_strings() == before


def test_clear_full_rows_removes_all_at_once_and_keeps_order():
    board = Board.from_rows([
        "#...",
        "####",
        ".#..",
        "####",
        "..#.",
        "####",
    ])
    assert board.clear_full_rows() == 3
    assert board.to_strings() == [
        "....",
        "....",
        "....",
        "#...",
        ".#..",
        "..#.",
    ]
    assert all(len(row) == 4 for row in board.cells)


def test_clear_full_rows_adjacent_rows():
    board = Board.from_rows(["#..#", "####", "####"])
    assert board.clear_full_rows() == 2
    assert board.to_strings() == ["....", "....", "#..#"]


def test_clear_resets_every_cell():
    board = Board.from_rows(["#.#", "###"])
    board.clear()
    assert board.filled_count() == 0
    assert board.rows == 2 and board.cols == 3


def test_rows_snapshot_is_a_copy():
    board = Board(2, 2)
    snap = board.rows_snapshot()
    board.merge([(0, 1)])
    assert snap[1][0] is Cell.EMPTY
    assert board.rows_snapshot()[1][0] is Cell.FILLED


def test_collide_walls_floor_and_stack():
    board = Board.from_rows(["....", "....", ".#.."])
    assert collide(board, [(-1, 0)])
    assert collide(board, [(4, 0)])
    assert collide(board, [(0, 3)])
    assert collide(board, [(1, 2)])
    assert not collide(board, [(0, 0), (2, 2), (3, 1)])


def test_collide_buffer_rows_only_hit_side_walls():
    board = Board.from_rows(["####"])
    assert not collide(board, [(0, -1), (3, -4)])
    assert collide(board, [(-1, -2)])
    assert collide(board, [(4, -1)])
