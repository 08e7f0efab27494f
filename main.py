import logging
import sys
import pygame
from tetris import DisplayPort, GameEngine, GameState
from tetris_config import CONFIG
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger(__name__)


class PygameDisplay(DisplayPort):
    """DisplayPort drawing snapshots onto a pygame surface."""
    def __init__(self, screen, font, big_font, config=CONFIG):
        self.screen = screen
        self.font = font
        self.big_font = big_font
        self.dims = compute_dims(config)
        self.render_assets = RenderAssets(self.dims, font, config["COLS"], config["ROWS"])
        self.overlay = Overlay()
        self.board_rect = pygame.Rect(self.dims.board_x, self.dims.board_y,
                                      self.dims.board_w, self.dims.board_h)

    def show_score(self, score, level):
        log.debug("score=%d level=%d", score, level)

    def show_pause(self, visible):
        self.overlay.show_pause(visible)

    def show_game_over(self, visible, final_score):
        self.overlay.show_game_over(visible, final_score)

    def render(self, snapshot):
        if snapshot.state is not GameState.READY:
            self.overlay.hide_start()
        self.render_assets.draw_snapshot(self.screen, snapshot)
        self.overlay.draw(self.screen, self.big_font, self.font, self.board_rect)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    screen = recreate_window(compute_dims())
    pygame.display.set_caption("Neon Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    display = PygameDisplay(screen, font, big_font)
    engine = GameEngine(display)
    controls = engine.controller
    engine.reset()
    clock = pygame.time.Clock()

    while True:
        clock.tick(CONFIG["FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                log.info("quit")
                pygame.quit(); sys.exit()
            if e.type in (pygame.KEYDOWN, pygame.KEYUP):
                controls.set_key(pygame.key.name(e.key), e.type == pygame.KEYDOWN)
        engine.tick(pygame.time.get_ticks())
        pygame.display.flip()


if __name__ == '__main__':
    main()
