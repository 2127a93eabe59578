import os


def _env_int(name, default):
    try:
        v = os.getenv(name)
        return int(v) if v is not None and v != "" else default
    except ValueError:
        return default


# Board geometry (cells are square)
CELL_PX = 20
GRID_WIDTH = 25
GRID_HEIGHT = 20
MIN_GRID_CELLS = 4
MIN_WINDOW_HEIGHT = 360

INFO_PANEL_WIDTH = 220
FPS = 60

# Engine
TICK_MS = _env_int("SNAKE_TICK_MS", 150)
FOOD_REWARD = 10
START_CELL = (10, 10)

# High score persistence
HIGHSCORE_FILE = os.getenv(
    "SNAKE_HIGHSCORE_FILE",
    os.path.abspath(os.path.join(os.path.dirname(__file__), 'highscore.json')),
)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (248, 113, 113)
YELLOW = (250, 204, 21)
GREY = (156, 163, 175)
DARK_GREY = (55, 65, 81)

BOARD_COLOR = (31, 41, 55)         # #1f2937
GRID_LINE_COLOR = (55, 65, 81)     # #374151
SNAKE_HEAD_COLOR = (16, 185, 129)  # #10b981
SNAKE_BODY_COLOR = (52, 211, 153)  # #34d399
FOOD_COLOR = (249, 115, 22)        # #f97316
INFO_PANEL_COLOR = (17, 24, 39)
BUTTON_COLOR = (75, 85, 99)
BUTTON_ACTIVE_COLOR = (5, 150, 105)

FLASH_DURATION = 0.5
