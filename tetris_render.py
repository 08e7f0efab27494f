"""
Rendering helpers for the Tetris front-end.

Everything here draws from an engine Snapshot; nothing reads engine state directly.

Optimizations:
- Pre-render block cell Surfaces per piece type and per size (board + preview) and blit them.
- Pre-render static background (grid + panel frames) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the grid changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims

# Neon palette per typeId
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (0,243,255),    # I
    2: (43,101,255),   # J
    3: (255,170,0),    # L
    4: (255,234,0),    # O
    5: (0,255,157),    # S
    6: (255,0,255),    # T
    7: (255,0,85),     # Z
}

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    hold_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.cols, self.rows = cols, rows
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((5,5,16))
        grid_col = (30,34,70)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        for px, py in ((d.next_x, d.next_y), (d.hold_x, d.hold_y)):
            frame = pygame.Rect(px-6, py-6, d.preview_cell*4+12, d.preview_cell*4+12)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.preview_surf: Dict[int, pygame.Surface] = {}
        c, pc = self.dims.cell, self.dims.preview_cell
        for t, col in COLORS.items():
            self.cell_surf[t] = self._block(c, col)
            self.preview_surf[t] = self._block(pc, col)

    @staticmethod
    def _block(size, col):
        s = pygame.Surface((size, size))
        s.fill(col)
        pygame.draw.rect(s, (255,255,255), (0,0,size,size), 1)
        return s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid):
        """Rebuilds the "locked blocks" surface from grid contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c, y*c))
        self._board_grid = grid

    def draw_cell(self, screen: pygame.Surface, t: int, bx: int, by: int):
        if by < 0: return
        screen.blit(self.cell_surf[t], (self.dims.board_x + bx*self.dims.cell,
                                        self.dims.board_y + by*self.dims.cell))

    def draw_preview(self, screen: pygame.Surface, piece, x: int, y: int):
        if piece is None: return
        pc = self.dims.preview_cell
        n = len(piece.shape)
        off = (4 - n) * pc // 2
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    screen.blit(self.preview_surf[v], (x + off + c*pc, y + off + r*pc))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, lines: int):
        d = self.dims
        f = self.font
        col = (200,210,240)
        if self.hud.title is None:
            self.hud.title = f.render("Neon Tetris", True, (197,202,233))
            self.hud.next_label = f.render("Next:", True, col)
            self.hud.hold_label = f.render("Hold:", True, col)
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, col)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, col)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, col)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(self.hud.next_label, (d.next_x, d.next_y - 26))
        screen.blit(self.hud.hold_label, (d.hold_x, d.hold_y - 26))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, col),
                f.render("←/→ Move  ↓ Soft drop", True, (165,175,215)),
                f.render("] / ↑ Rot CW  [ / Z CCW", True, (165,175,215)),
                f.render("C Hold  Space Pause", True, (165,175,215)),
                f.render("Enter Start  R Restart", True, (165,175,215)),
            ]
        y = d.hold_y + d.preview_cell*4 + 20
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Whole frame ----------
    def draw_snapshot(self, screen: pygame.Surface, snap):
        screen.blit(self.bg, (0,0))
        if snap.grid != self._board_grid:
            self.rebuild_board_surface(snap.grid)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        p = snap.piece
        if p is not None:
            for bx, by in p.cells():
                self.draw_cell(screen, p.type_id, bx, by)
        self.draw_preview(screen, snap.next_piece, self.dims.next_x, self.dims.next_y)
        self.draw_preview(screen, snap.hold_piece, self.dims.hold_x, self.dims.hold_y)
        self.draw_panel_hud(screen, snap.score, snap.level, snap.lines)
