"""Power-ups hidden in bricks that fall towards the racket once released."""

import enum
from dataclasses import dataclass

from arkanoid.config import BALL_DEFAULT_RADIUS, PU_DEFAULT_DX, PU_DEFAULT_SPEED


class PowerType(enum.IntEnum):
    """Kinds of power-up, numbered as in level files."""

    NONE = 0
    LASER = 1
    RACKET_GROW = 2
    CATCH_BALL = 3
    SLOW_DOWN = 4
    INTERRUPTION = 5
    PLAYER = 6


@dataclass
class PowerUp:
    """A power-up: its kind, its position and how it falls."""

    type: PowerType
    x: float = 0.0
    y: float = 0.0
    dx: float = float(PU_DEFAULT_DX)
    dy: float = float(PU_DEFAULT_SPEED)
    radius: float = float(BALL_DEFAULT_RADIUS)
    speed: float = float(PU_DEFAULT_SPEED)

    def __post_init__(self) -> None:
        self.type = PowerType(self.type)

    def update(self) -> None:
        """Move one step along the falling direction."""
        self.x += self.dx
        self.y += self.dy

    def place(self, x: float, y: float) -> None:
        """Put the power-up at the given point."""
        self.x = x
        self.y = y

    def destroy(self) -> None:
        """Consume the power-up so it no longer falls or applies."""
        self.type = PowerType.NONE