
CONFIG = {
    # Board
    "COLS": 10,
    "ROWS": 20,
    "SPAWN_X": 3,
    "SPAWN_Y": 0,

    # Input timing (ms)
    "DAS_MS": 160,
    "ARR_MS": 30,
    "SOFT_DROP_MS": 50,

    # Gravity (ms)
    "BASE_DROP_MS": 1000,
    "MIN_DROP_MS": 100,
    "LEVEL_SPEEDUP_MS": 100,
    "LINES_PER_LEVEL": 10,

    # Rules
    "WALL_KICKS": (-1, 1, -2, 2),
    "LINE_SCORES": (0, 100, 300, 500, 800),
    "SEED": None,

    # Presentation
    "CELL_SIZE": 32,
    "PREVIEW_CELL": 20,
    "FPS": 60,
}


def make_config(**overrides):
    """Return a copy of CONFIG with overrides applied; unknown names raise KeyError."""
    for key in overrides:
        if key not in CONFIG:
            raise KeyError(f"unknown config key: {key}")
    cfg = dict(CONFIG)
    cfg.update(overrides)
    return cfg
