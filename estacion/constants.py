"""Shared game constants, colour palette and the game state enumeration."""

from enum import Enum, auto

CELL_SIZE = 40
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
UI_HEIGHT = 200
MAX_ENERGY = 5
GAME_OVER_DELAY = 3.0  # seconds before returning to the menu
BOT_DEMO_DELAY = 0.5  # seconds between bot moves

# Cell symbols
WALL = "#"
FLOOR = "."
PLAYER = "P"
FINISH = "F"
DOOR_CLOSED = "D"
DOOR_OPEN = "O"
TANK_A = "A"
TANK_B = "B"
TANKS = frozenset({TANK_A, TANK_B})

# Colour palette (RGB)
WALL_COLOR = (45, 45, 65)
FLOOR_COLOR = (240, 240, 250)
PLAYER_COLOR = (0, 150, 255)
TANK_A_COLOR = (255, 80, 80)
TANK_B_COLOR = (80, 255, 80)
DOOR_CLOSED_COLOR = (139, 69, 19)
DOOR_OPEN_COLOR = (255, 215, 0)
FINISH_COLOR = (255, 255, 0)
ENERGY_BAR_COLOR = (30, 30, 40)
ENERGY_FILL_COLOR = (0, 255, 150)
UI_BACKGROUND_COLOR = (25, 25, 35)
TEXT_COLOR = (220, 220, 255)
HIGHLIGHT_COLOR = (255, 200, 0)
SUCCESS_COLOR = (0, 255, 150)
ERROR_COLOR = (255, 100, 100)


class GameState(Enum):
    """The screen the game is currently showing."""

    MENU = auto()
    PLAYING = auto()
    BOT_DEMO = auto()
    GAME_OVER_SCREEN = auto()