# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    preview_cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    hold_x: int
    hold_y: int
    next_x: int
    next_y: int

def compute_dims(config=None) -> Dims:
    c = CONFIG if config is None else config
    cell = int(c["CELL_SIZE"])
    preview_cell = int(c["PREVIEW_CELL"])
    margin = 16
    panel_w = max(220, preview_cell * 4 + 24)

    board_w = c["COLS"] * cell
    board_h = c["ROWS"] * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # previews sit under the HUD text, next above hold
    next_x = hold_x = panel_x + 12
    next_y = panel_y + 150
    hold_y = next_y + preview_cell * 4 + 40

    return Dims(
        cell=cell, preview_cell=preview_cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        hold_x=hold_x, hold_y=hold_y,
        next_x=next_x, next_y=next_y,
    )
