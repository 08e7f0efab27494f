"""Piece model, shapes, matrix rotation"""
from dataclasses import dataclass
from typing import List, Tuple

# typeId -> matrix; occupied cells carry the typeId itself
SHAPES = {
    1: [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    2: [[2,0,0],[2,2,2],[0,0,0]],
    3: [[0,0,3],[3,3,3],[0,0,0]],
    4: [[4,4],[4,4]],
    5: [[0,5,5],[5,5,0],[0,0,0]],
    6: [[0,6,0],[6,6,6],[0,0,0]],
    7: [[7,7,0],[0,7,7],[0,0,0]],
}

PIECE_NAMES = {1: "I", 2: "J", 3: "L", 4: "O", 5: "S", 6: "T", 7: "Z"}

def shape_cells(shape, ox, oy) -> List[Tuple[int, int]]:
    """Absolute (x, y) of every occupied cell, including rows above the board."""
    return [(ox+x, oy+y) for y, row in enumerate(shape) for x, v in enumerate(row) if v]

def rotate_cw(m):
    n = len(m)
    out = [[0]*n for _ in range(n)]
    for y in range(n):
        for x in range(n):
            out[x][n-1-y] = m[y][x]
    return out

def rotate_ccw(m):
    n = len(m)
    out = [[0]*n for _ in range(n)]
    for y in range(n):
        for x in range(n):
            out[n-1-x][y] = m[y][x]
    return out

@dataclass
class Piece:
    type_id: int
    shape: List[List[int]]
    x: int = 0
    y: int = 0

    @staticmethod
    def create(type_id: int, x: int = 0, y: int = 0) -> "Piece":
        if type_id not in SHAPES:
            raise ValueError(f"piece type must be 1..7, got {type_id!r}")
        return Piece(type_id, [r[:] for r in SHAPES[type_id]], x, y)

    @property
    def name(self) -> str:
        return PIECE_NAMES[self.type_id]

    # Rotation replaces the matrix; validity is the caller's business.
    def rotate_cw(self):
        self.shape = rotate_cw(self.shape)

    def rotate_ccw(self):
        self.shape = rotate_ccw(self.shape)

    def clone(self) -> "Piece":
        return Piece(self.type_id, [r[:] for r in self.shape], self.x, self.y)
