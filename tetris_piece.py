"""Piece model, spawn geometry and wall-kick rotation"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from tetris_board import Board, Coord, collide

PIECES = ["I", "J", "L", "O", "S", "T", "Z"]

# x relative to the spawn column x0, y absolute (buffer zone rows -4..-1).
# Order matters: the second coordinate is the rotation pivot.
SPAWN_OFFSETS: Dict[str, Tuple[Coord, ...]] = {
    "I": ((0, -4), (0, -3), (0, -2), (0, -1)),
    "J": ((1, -3), (1, -2), (1, -1), (0, -1)),
    "L": ((0, -3), (0, -2), (0, -1), (1, -1)),
    "O": ((0, -2), (1, -2), (0, -1), (1, -1)),
    "S": ((2, -2), (1, -2), (1, -1), (0, -1)),
    "T": ((0, -2), (1, -2), (2, -2), (1, -1)),
    "Z": ((0, -2), (1, -2), (1, -1), (2, -1)),
}

# Horizontal origin corrections tried in order when rotating
KICK_ORDER = [0, -1, 1, -2, 2]


def spawn_column(cols: int) -> int:
    return cols // 2 - 1


def spawn_offsets(kind: str, cols: int) -> Tuple[Coord, ...]:
    if kind not in SPAWN_OFFSETS:
        raise ValueError(f"unknown piece kind {kind!r}")
    x0 = spawn_column(cols)
    return tuple((x0 + dx, y) for dx, y in SPAWN_OFFSETS[kind])


def rotate_coords(coords, pivot: Coord) -> Tuple[Coord, ...]:
    """Quarter turn clockwise (rows grow downward) about ``pivot``."""
    x0, y0 = pivot
    return tuple((x0 + y0 - y, y0 + (x - x0)) for x, y in coords)


@dataclass(frozen=True)
class Piece:
    kind: str
    coords: Tuple[Coord, ...]

    @staticmethod
    def spawn(kind: str, cols: int) -> "Piece":
        return Piece(kind, spawn_offsets(kind, cols))

    @property
    def pivot(self) -> Coord:
        return self.coords[1]

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, tuple((x + dx, y + dy) for x, y in self.coords))

    def rotated(self, dx: int = 0) -> "Piece":
        """Shift by ``dx`` columns, then rotate about the shifted pivot."""
        shifted = self.moved(dx, 0)
        return Piece(self.kind, rotate_coords(shifted.coords, shifted.pivot))


# rotation

def try_rotate(board: Board, piece: Piece) -> Optional[Piece]:
    """First kick in KICK_ORDER whose rotated placement fits, or None."""
    if piece.kind == "O":
        return piece
    for dx in KICK_ORDER:
        test = piece.rotated(dx)
        if not collide(board, test.coords):
            return test
    return None


def try_rotate_neighbors(board: Board, piece: Piece) -> Optional[Piece]:
    """Pick a single correction from which cells beside the pivot are open.

    The pivot row is probed two cells to each side. Blocked on both immediate
    sides means there is no room to turn at all.
    """
    if piece.kind == "O":
        return piece
    x0, y0 = piece.pivot
    open2l = x0 > 1 and not board.is_filled(y0, x0 - 2)
    open1l = x0 > 0 and not board.is_filled(y0, x0 - 1)
    open1r = x0 < board.cols - 1 and not board.is_filled(y0, x0 + 1)
    open2r = x0 < board.cols - 2 and not board.is_filled(y0, x0 + 2)

    if not open1l and not open1r:
        return None
    if piece.kind == "I":
        if not open2l and open1l and open1r and open2r:
            dx = 1
        elif not open1l and open1r and open2r:
            dx = 2
        elif open2l and open1l and not open1r:
            dx = -2
        elif open1l and open1r and not open2r:
            dx = -1
        else:
            dx = 0
    elif not open1l:
        dx = 1
    elif not open1r:
        dx = -1
    else:
        dx = 0

    test = piece.rotated(dx)
    if collide(board, test.coords):
        return None
    return test


ROTATIONS: Dict[str, Callable[[Board, Piece], Optional[Piece]]] = {
    "kick": try_rotate,
    "neighbor": try_rotate_neighbors,
}


def shape_key(coords) -> Tuple[Coord, ...]:
    """Translation-free form of a set of cells, for comparing shapes."""
    min_x = min(x for x, _ in coords)
    min_y = min(y for _, y in coords)
    return tuple(sorted((x - min_x, y - min_y) for x, y in coords))


def orientations(kind: str) -> List[Tuple[Coord, ...]]:
    """Distinct translation-free shapes ``kind`` can take."""
    coords = SPAWN_OFFSETS[kind]
    seen: List[Tuple[Coord, ...]] = []
    for _ in range(4):
        key = shape_key(coords)
        if key not in seen:
            seen.append(key)
        coords = rotate_coords(coords, coords[1])
    return seen
