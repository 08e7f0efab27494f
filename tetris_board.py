"""Board: locked grid, placement checks, merge, line clears, piece slots"""
from typing import List, Optional
from tetris_config import CONFIG
from tetris_piece import Piece

Grid = List[List[int]]

class Board:
    def __init__(self, cols: Optional[int] = None, rows: Optional[int] = None):
        self.cols = CONFIG["COLS"] if cols is None else cols
        self.rows = CONFIG["ROWS"] if rows is None else rows
        self.grid: Grid = self.empty_grid()
        # Slots. A piece object lives in at most one of them.
        self.piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.hold_piece: Optional[Piece] = None

    def empty_grid(self) -> Grid:
        return [[0]*self.cols for _ in range(self.rows)]

    def reset(self):
        self.grid = self.empty_grid()
        self.piece = self.next_piece = self.hold_piece = None

    def is_valid(self, piece: Piece) -> bool:
        for y,row in enumerate(piece.shape):
            for x,v in enumerate(row):
                if not v: continue
                bx,by = piece.x+x, piece.y+y
                if bx<0 or bx>=self.cols or by>=self.rows: return False
                if by>=0 and self.grid[by][bx]: return False
        return True

    def merge(self, piece: Piece):
        for y,r in enumerate(piece.shape):
            for x,v in enumerate(r):
                if v:
                    by = piece.y+y
                    # cells above the top are dropped; the next spawn detects the overflow
                    if by>=0: self.grid[by][piece.x+x] = piece.type_id

    def clear_lines(self) -> int:
        kept = [row for row in self.grid if not all(row)]
        c = self.rows - len(kept)
        self.grid = [[0]*self.cols for _ in range(c)] + kept
        return c

    # ---------- slot transfers ----------
    def take_next(self, new_next: Piece) -> Piece:
        """Move the next piece into the active slot and install new_next."""
        if new_next is self.piece or new_next is self.hold_piece:
            raise RuntimeError("piece already owned by another slot")
        self.piece, self.next_piece = self.next_piece, new_next
        return self.piece

    def swap_hold(self) -> Optional[Piece]:
        """Exchange active and hold slots; returns the new active piece (may be None)."""
        if self.piece is not None and self.piece is self.hold_piece:
            raise RuntimeError("piece referenced from both active and hold slots")
        self.piece, self.hold_piece = self.hold_piece, self.piece
        return self.piece
