"""
Tetris game engine
==================

Frame-driven engine for a single-player falling-block game. It owns the
board, the active / next / hold pieces, scoring and gravity, and turns the
input controller's key state into moves once per frame.

-------------------------------------------------------------
STRUCTURE OVERVIEW
-------------------------------------------------------------

  • GameState: Ready -> Playing <-> Paused, Playing -> GameOver (terminal)
  • Snapshot: read-only view pushed to the presentation layer every tick
  • DisplayPort: what the engine reports to (score, overlays, render)
  • GameEngine: spawn / move / rotate / drop / lock / hold / scoring / tick

The engine never draws and never reads the clock. The frame driver calls
tick(now) with a monotonically increasing millisecond timestamp; key events
only flip flags on the InputController between ticks.

-------------------------------------------------------------
RULES
-------------------------------------------------------------

  • Rotation tries in place, then column kicks -1, +1, -2, +2 (no floor kicks)
  • Line clears score 100/300/500/800 x level
  • Level = lines // 10 + 1; gravity speeds up 100ms per level, floor 100ms
  • One hold per spawned piece
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from tetris_board import Board
from tetris_config import CONFIG
from tetris_input import Action, InputController
from tetris_piece import Piece, shape_cells
from tetris_rng import PieceRandomizer

log = logging.getLogger(__name__)

# -------------------------------------------------------------
# SCORING & GRAVITY
# -------------------------------------------------------------

def line_clear_points(cleared: int, level: int, table=None) -> int:
    table = CONFIG["LINE_SCORES"] if table is None else table
    return table[cleared] * level

def level_for_lines(lines: int, per_level: Optional[int] = None) -> int:
    per_level = CONFIG["LINES_PER_LEVEL"] if per_level is None else per_level
    return lines // per_level + 1

def drop_interval_for_level(level: int, config: Optional[Mapping] = None) -> int:
    """Milliseconds between gravity steps."""
    c = CONFIG if config is None else config
    return max(c["MIN_DROP_MS"], c["BASE_DROP_MS"] - (level - 1) * c["LEVEL_SPEEDUP_MS"])

# -------------------------------------------------------------
# OUTPUTS
# -------------------------------------------------------------

class GameState(enum.Enum):
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"

Cells = Tuple[Tuple[int, ...], ...]

@dataclass(frozen=True)
class PieceView:
    type_id: int
    shape: Cells
    x: int
    y: int

    @staticmethod
    def of(piece: Optional[Piece]) -> Optional["PieceView"]:
        if piece is None:
            return None
        return PieceView(piece.type_id, tuple(tuple(r) for r in piece.shape), piece.x, piece.y)

    def cells(self):
        return shape_cells(self.shape, self.x, self.y)

@dataclass(frozen=True)
class Snapshot:
    grid: Cells
    piece: Optional[PieceView]
    next_piece: Optional[PieceView]
    hold_piece: Optional[PieceView]
    score: int
    level: int
    lines: int
    state: GameState

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER


class DisplayPort:
    """Presentation collaborator. Subclass and override what you need."""
    def show_score(self, score: int, level: int): pass
    def show_pause(self, visible: bool): pass
    def show_game_over(self, visible: bool, final_score: int): pass
    def render(self, snapshot: Snapshot): pass

# -------------------------------------------------------------
# ENGINE
# -------------------------------------------------------------

class GameEngine:
    def __init__(self, display: Optional[DisplayPort] = None, config: Optional[Mapping] = None,
                 randomizer: Optional[PieceRandomizer] = None,
                 controller: Optional[InputController] = None):
        self.config = CONFIG if config is None else config
        self.display = display or DisplayPort()
        self.randomizer = randomizer or PieceRandomizer(self.config["SEED"])
        self.controller = controller or InputController(self.config)
        self.board = Board(self.config["COLS"], self.config["ROWS"])

        self.state = GameState.READY
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = self.config["BASE_DROP_MS"]
        self.drop_counter = 0.0
        self.last_time: Optional[float] = None
        self.can_hold = True

    # ---------- state ----------
    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    def reset(self):
        self.board.reset()
        self.controller.reset()
        self.state = GameState.READY
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = self.config["BASE_DROP_MS"]
        self.drop_counter = 0.0
        self.can_hold = True
        self.board.next_piece = self.randomizer.next_piece()
        self.display.show_score(self.score, self.level)
        self.display.show_pause(False)
        self.display.show_game_over(False, self.score)

    def start(self, now: Optional[float] = None):
        self.reset()
        self.last_time = now
        self.state = GameState.PLAYING
        log.info("game started")
        self.spawn_piece()

    def restart(self, now: Optional[float] = None):
        self.start(now)

    def toggle_pause(self, now: Optional[float] = None) -> bool:
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
            # resume from here, not from the last pre-pause frame
            if now is not None:
                self.last_time = now
        else:
            return False
        log.debug("paused=%s", self.paused)
        self.display.show_pause(self.paused)
        return True

    # ---------- pieces ----------
    def _to_spawn(self, piece: Piece):
        piece.x, piece.y = self.config["SPAWN_X"], self.config["SPAWN_Y"]

    def spawn_piece(self):
        piece = self.board.take_next(self.randomizer.next_piece())
        self._to_spawn(piece)
        self.can_hold = True
        if not self.board.is_valid(piece):
            self._end_game()

    def _end_game(self):
        self.state = GameState.GAME_OVER
        log.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)
        self.display.show_game_over(True, self.score)

    def move(self, piece: Piece, dx: int, dy: int) -> bool:
        piece.x += dx; piece.y += dy
        if not self.board.is_valid(piece):
            piece.x -= dx; piece.y -= dy
            return False
        return True

    def rotate(self, piece: Piece, direction: int) -> bool:
        """direction > 0 is clockwise. Returns False when no kick fits."""
        test = piece.clone()
        if direction > 0: test.rotate_cw()
        else: test.rotate_ccw()
        for dx in (0,) + tuple(self.config["WALL_KICKS"]):
            test.x = piece.x + dx
            if self.board.is_valid(test):
                piece.x = test.x
                piece.shape = test.shape
                return True
        return False

    def drop(self):
        piece = self.board.piece
        if piece is not None and not self.move(piece, 0, 1):
            self.lock()
        self.drop_counter = 0.0

    def lock(self):
        piece = self.board.piece
        self.board.merge(piece)
        cleared = self.board.clear_lines()
        log.debug("locked %s at (%d,%d), cleared %d", piece.name, piece.x, piece.y, cleared)
        if cleared:
            self._add_lines(cleared)
        self.spawn_piece()

    def _add_lines(self, cleared: int):
        self.lines += cleared
        self.score += line_clear_points(cleared, self.level, self.config["LINE_SCORES"])
        self.level = level_for_lines(self.lines, self.config["LINES_PER_LEVEL"])
        self.drop_interval = drop_interval_for_level(self.level, self.config)
        self.display.show_score(self.score, self.level)

    def hold_current_piece(self) -> bool:
        if not self.can_hold or self.board.piece is None:
            return False
        if self.board.hold_piece is None:
            self.board.swap_hold()
            self._to_spawn(self.board.hold_piece)
            self.spawn_piece()
        else:
            incoming = self.board.hold_piece.clone()
            self._to_spawn(incoming)
            if not self.board.is_valid(incoming):
                return False
            self.board.swap_hold()
            self._to_spawn(self.board.piece)
            self._to_spawn(self.board.hold_piece)
        self.can_hold = False
        log.debug("hold: %s", self.board.hold_piece.name)
        return True

    # ---------- per-frame ----------
    def apply(self, action) -> bool:
        """Apply one gameplay action to the active piece. Unknown actions are ignored."""
        piece = self.board.piece
        if self.state is not GameState.PLAYING or piece is None:
            return False
        if action is Action.MOVE_LEFT: return self.move(piece, -1, 0)
        if action is Action.MOVE_RIGHT: return self.move(piece, 1, 0)
        if action is Action.ROTATE_CW: return self.rotate(piece, 1)
        if action is Action.ROTATE_CCW: return self.rotate(piece, -1)
        if action is Action.HOLD: return self.hold_current_piece()
        if action is Action.SOFT_DROP:
            self.drop()
            return True
        return False

    def update(self, dt: float):
        if self.state is not GameState.PLAYING:
            return
        for action in self.controller.update(dt):
            self.apply(action)
            if self.state is not GameState.PLAYING:
                return
        self.drop_counter += dt
        if self.drop_counter > self.drop_interval:
            self.drop()

    def handle_request(self, action, now: Optional[float] = None) -> bool:
        if action is Action.TOGGLE_PAUSE:
            return self.toggle_pause(now)
        if action is Action.START:
            if self.state in (GameState.READY, GameState.GAME_OVER):
                self.start(now)
                return True
            return False
        if action is Action.RESTART:
            self.restart(now)
            return True
        return False

    def tick(self, now: float) -> Snapshot:
        for req in self.controller.pop_requests():
            self.handle_request(req, now)
        dt = 0.0 if self.last_time is None else max(0.0, now - self.last_time)
        self.last_time = now
        self.update(dt)
        snap = self.snapshot()
        self.display.render(snap)
        return snap

    def snapshot(self) -> Snapshot:
        b = self.board
        return Snapshot(
            grid=tuple(tuple(r) for r in b.grid),
            piece=PieceView.of(b.piece),
            next_piece=PieceView.of(b.next_piece),
            hold_piece=PieceView.of(b.hold_piece),
            score=self.score, level=self.level, lines=self.lines,
            state=self.state,
        )
