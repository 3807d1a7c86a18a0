"""
Game engine: active/next piece, collisions, locking, scoring and the
play/pause/game-over state machine.

The engine never sleeps, draws or reads events. A shell drives it through
the operations below (or :meth:`Game.apply` with a :class:`Command`) and
reads state back through :meth:`Game.snapshot`. All operations run to
completion; a multi-threaded host must serialize calls behind one lock.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tetris_board import Board, Cell, Coord, collide
from tetris_config import CONFIG, LEVEL_SPEEDS_MS, LEVEL_THRESHOLDS, LINE_CLEAR_BASE
from tetris_input import Command
from tetris_piece import PIECES, ROTATIONS, Piece
from tetris_rng import LCGRandom

log = logging.getLogger(__name__)


def line_score(cleared: int) -> int:
    """100, 200, 400, 800 for 1-4 rows cleared in one landing."""
    if cleared < 1:
        return 0
    return LINE_CLEAR_BASE * 2 ** (cleared - 1)


def derived_level(score: int) -> int:
    level = LEVEL_THRESHOLDS[0][1]
    for threshold, lvl in LEVEL_THRESHOLDS:
        if score >= threshold:
            level = lvl
    return level


def derived_speed(level: int) -> int:
    top = max(LEVEL_SPEEDS_MS)
    return LEVEL_SPEEDS_MS[min(max(level, 1), top)]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer."""
    rows: int
    cols: int
    board: Tuple[Tuple[Cell, ...], ...]
    active_kind: str
    active: Tuple[Coord, ...]
    next_kind: str
    next: Tuple[Coord, ...]
    ghost: Tuple[Coord, ...]
    score: int
    level: int
    lines: int
    speed: int
    playing: bool
    game_over: bool

    def visible_active(self) -> List[Coord]:
        return [(x, y) for x, y in self.active if y >= 0]

    def frame(self) -> List[List[Cell]]:
        """Board with the visible cells of the active piece filled in."""
        grid = [list(row) for row in self.board]
        for x, y in self.visible_active():
            grid[y][x] = Cell.FILLED
        return grid


class Game:
    """Owns and mutates the whole game state."""

    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None,
                 rng=None, rotation: Optional[str] = None):
        rows = CONFIG["ROWS"] if rows is None else rows
        cols = CONFIG["COLS"] if cols is None else cols
        if cols < 4:
            raise ValueError(f"board needs at least 4 columns, got {cols}")
        rotation = rotation or CONFIG["ROTATION"]
        if rotation not in ROTATIONS:
            raise ValueError(f"unknown rotation strategy {rotation!r}")
        self.board = Board(rows, cols)
        self.rng = rng if rng is not None else LCGRandom(CONFIG["SEED"])
        self._rotate = ROTATIONS[rotation]
        self.playing = False
        self._reset()

    def _reset(self):
        self.board.clear()
        self.current = self._spawn()
        self.next = self._spawn()
        self.score = 0
        self.lines = 0
        self.level = derived_level(0)
        self.speed = derived_speed(self.level)
        self.game_over = False

    def _spawn(self) -> Piece:
        return Piece.spawn(PIECES[self.rng.next_index()], self.board.cols)

    @property
    def active(self) -> bool:
        return self.playing and not self.game_over

    def will_crash(self, coords) -> bool:
        return collide(self.board, coords)

    # ---------- movement ----------
    def _shift(self, dx: int):
        if not self.active:
            return
        test = self.current.moved(dx, 0)
        if not self.will_crash(test.coords):
            self.current = test

    def move_left(self):
        self._shift(-1)

    def move_right(self):
        self._shift(1)

    def move_down(self) -> bool:
        """Step down one row. False means the piece landed (or nothing moved)."""
        if not self.active:
            return False
        test = self.current.moved(0, 1)
        if not self.will_crash(test.coords):
            self.current = test
            return True
        self._lock()
        return False

    def drop_down(self):
        while self.move_down():
            pass

    def rotate(self):
        if not self.active or self.current.kind == "O":
            return
        test = self._rotate(self.board, self.current)
        if test is not None:
            self.current = test

    def tick(self) -> bool:
        return self.move_down()

    # ---------- landing ----------
    def _lock(self):
        overflow = self.board.merge(self.current.coords)
        log.debug("locked %s at %s", self.current.kind, self.current.coords)
        if overflow:
            self.game_over = True
            log.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)
        else:
            cleared = self.board.clear_full_rows()
            if cleared:
                self.score += line_score(cleared)
                self.lines += cleared
                self.level = derived_level(self.score)
                self.speed = derived_speed(self.level)
                log.debug("cleared %d rows, score=%d level=%d", cleared, self.score, self.level)
        self.current = Piece.spawn(self.next.kind, self.board.cols)
        self.next = self._spawn()

    # ---------- lifecycle ----------
    def pause_toggle(self):
        self.playing = not self.playing

    def restart(self):
        self._reset()
        log.info("restart")

    def apply(self, command: Command):
        """Run one input command. Anything but PAUSE also starts an idle game."""
        if command is Command.PAUSE:
            self.pause_toggle()
            return
        if command is Command.ROTATE:
            self.rotate()
        elif command is Command.MOVE_LEFT:
            self.move_left()
        elif command is Command.MOVE_RIGHT:
            self.move_right()
        elif command is Command.SOFT_DROP:
            self.move_down()
        elif command is Command.HARD_DROP:
            self.drop_down()
        elif command is Command.RESTART:
            self.restart()
        if not self.playing:
            self.pause_toggle()

    # ---------- queries ----------
    def ghost_coords(self) -> Tuple[Coord, ...]:
        """Where the active piece would come to rest after a hard drop."""
        test = self.current
        while True:
            below = test.moved(0, 1)
            if self.will_crash(below.coords):
                return test.coords
            test = below

    def snapshot(self) -> Snapshot:
        return Snapshot(
            rows=self.board.rows,
            cols=self.board.cols,
            board=self.board.rows_snapshot(),
            active_kind=self.current.kind,
            active=self.current.coords,
            next_kind=self.next.kind,
            next=self.next.coords,
            ghost=self.ghost_coords(),
            score=self.score,
            level=self.level,
            lines=self.lines,
            speed=self.speed,
            playing=self.playing,
            game_over=self.game_over,
        )
