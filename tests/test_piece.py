import pytest

from tetris_piece import (
    PIECES, SPAWN_OFFSETS, Piece, orientations, rotate_coords, shape_key, spawn_offsets,
)


def test_spawn_offsets_exact_on_ten_columns():
    # x0 = 10 / 2 - 1 = 4
    assert spawn_offsets("I", 10) == ((4, -4), (4, -3), (4, -2), (4, -1))
    assert spawn_offsets("J", 10) == ((5, -3), (5, -2), (5, -1), (4, -1))
    assert spawn_offsets("L", 10) == ((4, -3), (4, -2), (4, -1), (5, -1))
    assert spawn_offsets("O", 10) == ((4, -2), (5, -2), (4, -1), (5, -1))
    assert spawn_offsets("S", 10) == ((6, -2), (5, -2), (5, -1), (4, -1))
    assert spawn_offsets("T", 10) == ((4, -2), (5, -2), (6, -2), (5, -1))
    assert spawn_offsets("Z", 10) == ((4, -2), (5, -2), (5, -1), (6, -1))


def test_spawn_centers_on_odd_width():
    assert spawn_offsets("O", 7) == ((2, -2), (3, -2), (2, -1), (3, -1))


def test_spawn_is_entirely_in_buffer_zone():
    for kind in PIECES:
        coords = spawn_offsets(kind, 10)
        assert len(coords) == 4
        assert len(set(coords)) == 4
        assert all(-4 <= y <= -1 for _, y in coords)


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        Piece.spawn("X", 10)


def test_rotate_coords_axis_identity():
    # (x, y) -> (x0 + y0 - y, y0 + x - x0)
    assert rotate_coords([(6, -2)], (5, -2)) == ((5, -1),)
    assert rotate_coords([(5, -1)], (5, -2)) == ((4, -2),)
    assert rotate_coords([(5, -2)], (5, -2)) == ((5, -2),)


def test_t_rotates_clockwise_about_second_cell():
    piece = Piece.spawn("T", 10).rotated()
    assert piece.coords == ((5, -3), (5, -2), (5, -1), (4, -2))
    assert piece.pivot == (5, -2)


def test_four_rotations_are_identity():
    for kind in PIECES:
        piece = Piece.spawn(kind, 10)
        turned = piece
        for _ in range(4):
            turned = turned.rotated()
        assert turned == piece


def test_rotated_with_kick_shifts_before_turning():
    piece = Piece.spawn("I", 10)
    assert piece.rotated(2) == piece.moved(2, 0).rotated()


def test_moved_is_a_whole_piece_translation():
    piece = Piece.spawn("S", 10)
    moved = piece.moved(-1, 3)
    assert moved.kind == "S"
    assert moved.coords == tuple((x - 1, y + 3) for x, y in piece.coords)
    assert shape_key(moved.coords) == shape_key(piece.coords)


def test_orientation_counts():
    assert len(orientations("O")) == 1
    for kind in "ISZ":
        assert len(orientations(kind)) == 2
    for kind in "JLT":
        assert len(orientations(kind)) == 4


def test_spawn_table_covers_all_kinds():
    assert sorted(SPAWN_OFFSETS) == sorted(PIECES)
