"""Bricks of the board, their colours, points and hidden power-ups."""

import enum
from dataclasses import dataclass, field

from arkanoid import config
from arkanoid.powerups import PowerType, PowerUp


class BrickColor(enum.IntEnum):
    """Brick colours, numbered as in level files."""

    WHITE = 0
    ORANGE = 1
    CYAN = 2
    GREEN = 3
    RED = 4
    BLUE = 5
    MAGENTA = 6
    YELLOW = 7
    SILVER = 8
    GOLD = 9
    SILVER_MODIFIED = 10
    NONE = 11


_POINTS = {
    BrickColor.WHITE: config.WHITE_POINTS,
    BrickColor.ORANGE: config.ORANGE_POINTS,
    BrickColor.CYAN: config.CYAN_POINTS,
    BrickColor.GREEN: config.GREEN_POINTS,
    BrickColor.RED: config.RED_POINTS,
    BrickColor.BLUE: config.BLUE_POINTS,
    BrickColor.MAGENTA: config.MAGENTA_POINTS,
    BrickColor.YELLOW: config.YELLOW_POINTS,
    BrickColor.SILVER_MODIFIED: config.SILVER_POINTS,
}

_RGB = {
    BrickColor.WHITE: config.WHITE_RGB,
    BrickColor.ORANGE: config.ORANGE_RGB,
    BrickColor.CYAN: config.CYAN_RGB,
    BrickColor.GREEN: config.GREEN_RGB,
    BrickColor.RED: config.RED_RGB,
    BrickColor.BLUE: config.BLUE_RGB,
    BrickColor.MAGENTA: config.MAGENTA_RGB,
    BrickColor.YELLOW: config.YELLOW_RGB,
    BrickColor.SILVER: config.SILVER_RGB,
    BrickColor.SILVER_MODIFIED: config.SILVER_MODIFIED_RGB,
    BrickColor.GOLD: config.GOLD_RGB,
    BrickColor.NONE: config.BACKGROUND_RGB,
}


def points_for_color(color: BrickColor) -> int:
    """Points scored for hitting a brick of this colour."""
    return _POINTS.get(BrickColor(color), 0)


def rgb_for_color(color: BrickColor) -> tuple:
    """Display colour of a brick of this colour."""
    return _RGB.get(BrickColor(color), config.BACKGROUND_RGB)


def _no_power_up() -> PowerUp:
    return PowerUp(PowerType.NONE)


@dataclass
class Brick:
    """A brick; silver needs two hits and gold cannot be destroyed."""

    color: BrickColor
    power_up: PowerUp = field(default_factory=_no_power_up)
    width: int = config.BRICK_DEFAULT_WIDTH
    height: int = config.BRICK_DEFAULT_HEIGHT
    destroyed: bool = field(init=False)
    points: int = field(init=False)
    rgb: tuple = field(init=False)

    def __post_init__(self) -> None:
        self.color = BrickColor(self.color)
        self.destroyed = self.color is BrickColor.NONE
        self.points = points_for_color(self.color)
        self.rgb = rgb_for_color(self.color)

    def hit(self, middle_x: float, middle_y: float, interruption: bool = False) -> None:
        """Apply a hit; a released power-up starts from the brick's middle."""
        if self.color not in (BrickColor.SILVER, BrickColor.GOLD, BrickColor.NONE):
            self.destroyed = True
            self.color = BrickColor.NONE
            self.points = 0
            if self.power_up.type is not PowerType.NONE and not interruption:
                self.power_up.place(middle_x, middle_y)
        elif self.color is BrickColor.SILVER:
            self.color = BrickColor.SILVER_MODIFIED
            self.rgb = rgb_for_color(self.color)
            self.points = points_for_color(self.color)