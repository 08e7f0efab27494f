import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from tetris import GameEngine
from tetris_config import make_config
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import COLORS, RenderAssets
from tetris_rng import PieceRandomizer


class LayoutTests(unittest.TestCase):
    def test_board_fits_grid(self):
        d = compute_dims(make_config(CELL_SIZE=30))
        self.assertEqual((d.board_w, d.board_h), (300, 600))
        self.assertEqual(d.panel_x, d.board_x + d.board_w + d.margin)
        self.assertEqual(d.total_w, d.panel_x + d.panel_w + d.margin)

    def test_previews_do_not_overlap(self):
        d = compute_dims()
        self.assertGreaterEqual(d.hold_y, d.next_y + d.preview_cell * 4)


class OverlayTests(unittest.TestCase):
    def test_panels(self):
        o = Overlay()
        self.assertEqual(o.lines()[0], "NEON TETRIS")
        o.hide_start()
        self.assertEqual(o.lines(), [])
        o.show_pause(True)
        self.assertEqual(o.lines()[0], "PAUSED")
        o.show_game_over(True, 2400)
        self.assertEqual(o.lines()[:2], ["GAME OVER", "Score: 2400"])
        o.show_game_over(False, 0)
        o.show_pause(False)
        self.assertEqual(o.lines(), [])


class RenderSmokeTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def test_draw_snapshot(self):
        cfg = make_config(SEED=7)
        dims = compute_dims(cfg)
        font = pygame.font.Font(None, 22)
        assets = RenderAssets(dims, font, cfg["COLS"], cfg["ROWS"])
        screen = pygame.Surface((dims.total_w, dims.total_h))

        engine = GameEngine(config=cfg, randomizer=PieceRandomizer(7))
        engine.start(0)
        engine.board.grid[19][0] = 2
        snap = engine.snapshot()
        assets.draw_snapshot(screen, snap)

        c = dims.cell
        locked = screen.get_at((dims.board_x + c // 2, dims.board_y + 19 * c + c // 2))
        self.assertEqual(tuple(locked)[:3], COLORS[2])
        px, py = snap.piece.cells()[0]
        active = screen.get_at((dims.board_x + px * c + c // 2, dims.board_y + py * c + c // 2))
        self.assertEqual(tuple(active)[:3], COLORS[snap.piece.type_id])

        Overlay().draw(screen, font, font, pygame.Rect(dims.board_x, dims.board_y, dims.board_w, dims.board_h))


if __name__ == "__main__":
    unittest.main()
