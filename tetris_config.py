
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 28,
    "FPS": 60,
    "LOCK_DELAY_MS": 500,
    "GRAVITY_BASE_MS": 1000,
    "GRAVITY_STEP_MS": 50,
    "GRAVITY_MIN_MS": 100,
    "PREVIEW_COUNT": 2,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
