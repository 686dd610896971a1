"""Laser shots fired from the racket and the collection of them."""

from dataclasses import dataclass, field

from arkanoid import config


@dataclass(eq=False)
class Laser:
    """A laser shot rising from the racket."""

    x1: float
    y1: float = float(config.RACKET_BOTTOM_POSITION - config.LASER_DEFAULT_HEIGHT)
    y2: float = float(config.RACKET_BOTTOM_POSITION)
    dx: float = float(config.BALL_DEFAULT_DX)
    dy: float = float(config.BALL_DEFAULT_DY)
    speed: float = float(config.LASER_DEFAULT_SPEED)
    width: float = float(config.LASER_DEFAULT_WIDTH)
    height: float = float(config.LASER_DEFAULT_HEIGHT)
    x2: float = field(init=False)

    def __post_init__(self) -> None:
        self.x2 = self.x1 + config.LASER_DEFAULT_WIDTH

    def update(self) -> None:
        """Move one step along the direction at the laser's speed."""
        step_x = self.dx * self.speed
        step_y = self.dy * self.speed
        self.x1 += step_x
        self.x2 += step_x
        self.y1 += step_y
        self.y2 += step_y

    def is_lost(self) -> bool:
        """Whether the shot has reached the status bar."""
        return self.y1 <= config.SEPARATION_LINE_HEIGHT


@dataclass
class Lasers:
    """Shots in flight and the shots left before the laser power ends."""

    lasers: list = field(default_factory=list)
    remaining: int = config.DEFAULT_NUMBER_OF_LASER

    def create(self, x: float) -> Laser:
        """Fire a shot whose left edge is at ``x`` and return it."""
        laser = Laser(x)
        self.lasers.append(laser)
        return laser

    def remove(self, laser: Laser) -> None:
        """Take this very shot away; unknown shots are ignored."""
        self.lasers = [other for other in self.lasers if other is not laser]

    def reset(self) -> None:
        """Remove every shot and restore the shot count."""
        self.lasers.clear()
        self.remaining = config.DEFAULT_NUMBER_OF_LASER

    def __iter__(self):
        return iter(list(self.lasers))

    def __len__(self) -> int:
        return len(self.lasers)