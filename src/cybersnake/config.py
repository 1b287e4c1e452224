from __future__ import annotations

# Board
GRID_SIZE = 20
CELL_SIZE = 20
BOARD_SIZE = GRID_SIZE * CELL_SIZE
BORDER = 2

# Window: board plus room for the score line and button underneath.
MARGIN = 40
PANEL_HEIGHT = 120
WIDTH = BOARD_SIZE + MARGIN * 2
HEIGHT = BOARD_SIZE + MARGIN + PANEL_HEIGHT

FPS = 60

# Simulation cadence in milliseconds.
TICK_MS = 150
MAX_CATCHUP_TICKS = 3

# Directions, screen coordinates (y grows downward).
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

INITIAL_SNAKE = ((10, 10),)
INITIAL_DIRECTION = RIGHT
INITIAL_FOOD = (15, 15)

# Palette
BACKGROUND = (0, 14, 23)  # #000e17
ACCENT = (145, 196, 110)  # #91c46e
SNAKE = (95, 197, 235)  # #5fc5eb
FOOD = ACCENT
TEXT = ACCENT
BUTTON_TEXT = BACKGROUND
OVERLAY = (0, 14, 23, 170)

FONT_NAME = None
TITLE_SIZE = 48
HEADING_SIZE = 40
TEXT_SIZE = 26

TITLE = "Cyberpunk Snake"
