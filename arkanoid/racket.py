"""The player's racket."""

from dataclasses import dataclass

from arkanoid import config


@dataclass
class Racket:
    """The racket: position and size."""

    x: float = float(config.SCREEN_WIDTH // 2 - config.RACKET_DEFAULT_WIDTH // 2)
    y: float = float(config.RACKET_BOTTOM_POSITION)
    width: int = config.RACKET_DEFAULT_WIDTH
    height: int = config.RACKET_DEFAULT_HEIGHT
    speed: int = config.RACKET_DEFAULT_SPEED

    def move_left(self) -> None:
        """Move one step to the left."""
        self.x -= self.speed

    def move_right(self) -> None:
        """Move one step to the right."""
        self.x += self.speed

    def reset(self) -> None:
        """Restore the default size and speed; the position stays."""
        self.width = config.RACKET_DEFAULT_WIDTH
        self.height = config.RACKET_DEFAULT_HEIGHT
        self.speed = config.RACKET_DEFAULT_SPEED