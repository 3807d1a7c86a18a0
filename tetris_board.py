"""Board grid, collision and line clearing"""
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

Coord = Tuple[int, int]  # (x, y) -> (col, row); row < 0 is the buffer zone


class Cell(Enum):
    EMPTY = 0
    FILLED = 1


class Board:
    """Visible playfield of ``rows`` x ``cols`` cells.

    Cells only change through :meth:`merge` and :meth:`clear_full_rows`.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"board must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells: List[List[Cell]] = [[Cell.EMPTY] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> "Board":
        """Build a board from strings, ``#`` filled and ``.`` empty, top row first."""
        if not lines:
            raise ValueError("from_rows needs at least one row")
        cols = len(lines[0])
        board = cls(len(lines), cols)
        for y, line in enumerate(lines):
            if len(line) != cols:
                raise ValueError(f"row {y} has {len(line)} cells, expected {cols}")
            board.cells[y] = [Cell.FILLED if ch == "#" else Cell.EMPTY for ch in line]
        return board

    def is_filled(self, row: int, col: int) -> bool:
        if row < 0:
            return False
        return self.cells[row][col] is Cell.FILLED

    def merge(self, coords: Iterable[Coord]) -> List[Coord]:
        """Fill every visible coordinate; return the ones left in the buffer zone."""
        overflow = []
        for x, y in coords:
            if y < 0:
                overflow.append((x, y))
            else:
                self.cells[y][x] = Cell.FILLED
        return overflow

    def clear_full_rows(self) -> int:
        """Drop all full rows at once and pad the top with empty rows."""
        kept = [row for row in self.cells if any(c is Cell.EMPTY for c in row)]
        cleared = self.rows - len(kept)
        if cleared:
            self.cells = [[Cell.EMPTY] * self.cols for _ in range(cleared)] + kept
        return cleared

    def clear(self):
        for row in self.cells:
            row[:] = [Cell.EMPTY] * self.cols

    def filled_count(self) -> int:
        return sum(c is Cell.FILLED for row in self.cells for c in row)

    def rows_snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def to_strings(self) -> List[str]:
        return ["".join("#" if c is Cell.FILLED else "." for c in row) for row in self.cells]


def collide(board: Board, coords: Iterable[Coord]) -> bool:
    """True if any coordinate leaves the side walls or floor, or hits a filled cell.

    Buffer-zone rows only collide with the side walls.
    """
    for x, y in coords:
        if x < 0 or x >= board.cols or y >= board.rows:
            return True
        if y >= 0 and board.cells[y][x] is Cell.FILLED:
            return True
    return False
