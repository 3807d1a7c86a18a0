"""Injected piece randomizers"""
import random
from typing import Optional, Sequence, Union

from tetris_piece import PIECES


class LCGRandom:
    """Uniform choice among the 7 kinds driven by a 32-bit LCG.

    Same seed, same piece sequence. No repeat rejection, no bag.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.getrandbits(32)
        self.seed = seed & 0xFFFFFFFF
        self.state = self.seed

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_index(self) -> int:
        return self._rand() % len(PIECES)

    def next_piece(self) -> str:
        return PIECES[self.next_index()]


class SequenceRandom:
    """Cycles through a fixed list of kinds (``"T"``) or indices (``5``)."""

    def __init__(self, sequence: Sequence[Union[int, str]]):
        if not sequence:
            raise ValueError("SequenceRandom needs at least one entry")
        self.indices = []
        for item in sequence:
            idx = PIECES.index(item) if isinstance(item, str) else item
            if not 0 <= idx < len(PIECES):
                raise ValueError(f"piece index out of range: {item!r}")
            self.indices.append(idx)
        self.pos = 0

    def next_index(self) -> int:
        idx = self.indices[self.pos % len(self.indices)]
        self.pos += 1
        return idx

    def next_piece(self) -> str:
        return PIECES[self.next_index()]
