
"""Uniform piece randomizer module"""
import random
from typing import Optional
from tetris_piece import SHAPES


class PieceRandom:
    """Independent uniform draws over the 7 shapes; repeats are allowed."""
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_index(self) -> int:
        return self._rng.randrange(len(SHAPES))
