from __future__ import annotations

from typing import Sequence

from tetris_board import Board
from tetris_engine import Game
from tetris_rng import SequenceRandom


def make_game(pieces: Sequence[str] = ("O",), rows: Sequence[str] | None = None,
              rotation: str = "kick", playing: bool = True) -> Game:
    """Game on a scripted piece sequence, optionally seeded with a board layout."""

    if rows is not None:
        game = Game(len(rows), len(rows[0]), rng=SequenceRandom(pieces), rotation=rotation)
        game.board = Board.from_rows(rows)
    else:
        game = Game(20, 10, rng=SequenceRandom(pieces), rotation=rotation)
    if playing:
        game.pause_toggle()
    return game


def empty_rows(count: int, cols: int = 10) -> list[str]:
    return ["." * cols] * count
