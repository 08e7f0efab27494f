"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import Piece, SHAPES

class PieceRandomizer:
    TYPES = sorted(SHAPES)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_type(self) -> int:
        return self._rng.choice(self.TYPES)

    def next_piece(self) -> Piece:
        return Piece.create(self.next_type())
