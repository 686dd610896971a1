"""Game-wide constants and the paths of level and best-score files."""

from pathlib import Path

# Board layout
NUMBER_OF_BRICKS_PER_ROW = 14
NUMBER_OF_ROW = 7

BRICK_DEFAULT_WIDTH = 80
BRICK_DEFAULT_HEIGHT = 30

SCREEN_WIDTH = NUMBER_OF_BRICKS_PER_ROW * BRICK_DEFAULT_WIDTH
SCREEN_HEIGHT = 900

# Status bar at the top of the screen
UI_TEXT_INFO_HEIGHT = 10
UI_TEXT_INFO_WIDTH_BETWEEN_WALLS = 20
SEPARATION_LINE_HEIGHT = UI_TEXT_INFO_HEIGHT * 6

# Racket
RACKET_DEFAULT_WIDTH = 120
RACKET_DEFAULT_HEIGHT = 20
RACKET_DEFAULT_SPEED = 5
RACKET_BOTTOM_POSITION = SCREEN_HEIGHT - 100

# Ball
BALL_BOTTOM_POSITION = 790
BALL_DEFAULT_RADIUS = 7
BALL_DEFAULT_SPEED = 6
BALL_DEFAULT_DX = 0
BALL_DEFAULT_DY = -1

# Laser
LASER_DEFAULT_SPEED = 10
LASER_DEFAULT_WIDTH = 2
LASER_DEFAULT_HEIGHT = 30

# Power-ups
PU_DEFAULT_DY = 1
PU_DEFAULT_DX = 0
PU_DEFAULT_SPEED = 4

DEFAULT_BALL_DECREASE = 1
DEFAULT_RACKET_INCREASE = 10
DEFAULT_NUMBER_OF_LASER = 3
DEFAULT_NUMBER_OF_BALLS = 3

# Points gained per brick
WHITE_POINTS = 50
ORANGE_POINTS = 60
CYAN_POINTS = 70
GREEN_POINTS = 80
RED_POINTS = 90
BLUE_POINTS = 100
MAGENTA_POINTS = 110
YELLOW_POINTS = 120
SILVER_POINTS = 200

# Game statistics
DEFAULT_NUMBER_OF_LIVES = 1
TOTAL_LEVELS = 4

# Letter drawn on a brick for each power-up type
POWER_UP_LETTERS = {
    1: "L",  # laser
    2: "R",  # racket grow
    3: "C",  # catch
    4: "S",  # slow down
    5: "I",  # interruption
    6: "P",  # extra player
}

# Colours
WHITE_RGB = (255, 255, 255)
ORANGE_RGB = (255, 165, 0)
CYAN_RGB = (0, 255, 255)
GREEN_RGB = (0, 255, 0)
RED_RGB = (255, 0, 0)
BLUE_RGB = (0, 0, 255)
MAGENTA_RGB = (255, 0, 255)
YELLOW_RGB = (255, 255, 0)
SILVER_RGB = (192, 192, 192)
SILVER_MODIFIED_RGB = (140, 140, 150)
GOLD_RGB = (255, 215, 0)
BACKGROUND_RGB = (0, 0, 0)
PURPLE_UP_RGB = (147, 112, 219)

DEFAULT_LEVEL_DIRECTORY = Path("levels")


def _check_level(number: int) -> None:
    if not 0 <= number < TOTAL_LEVELS:
        raise ValueError(
            f"no level {number}; levels run from 0 to {TOTAL_LEVELS - 1}"
        )


def level_path(number: int, directory=DEFAULT_LEVEL_DIRECTORY) -> Path:
    """Return the path of the layout file of level ``number``."""
    _check_level(number)
    return Path(directory) / f"level_{number + 1}"


def best_score_path(number: int, directory=DEFAULT_LEVEL_DIRECTORY) -> Path:
    """Return the path of the best-score file of level ``number``."""
    _check_level(number)
    return Path(directory) / f"best_score_{number + 1}"