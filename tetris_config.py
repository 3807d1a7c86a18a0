CONFIG = {
    "ROWS": 20,
    "COLS": 10,
    "CELL_SIZE": 28,
    "SEED": None,
    "ROTATION": "kick",       # "kick" (priority list) or "neighbor" (4-neighbour table)
    "DAS_MS": 170,
    "ARR_MS": 50,
    "LOG_LEVEL": "INFO",
}

# (minimum score, level), ascending
LEVEL_THRESHOLDS = [(0, 1), (1000, 2), (3000, 3), (5000, 4), (7000, 5)]

# ms between automatic downward steps per level
LEVEL_SPEEDS_MS = {1: 300, 2: 200, 3: 120, 4: 70, 5: 40}

LINE_CLEAR_BASE = 100
