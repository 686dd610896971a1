"""The ball and the collection of balls in play."""

from dataclasses import dataclass, field

from arkanoid import config


@dataclass(eq=False)
class Ball:
    """A ball: position, direction, radius and speed."""

    x: float = float(config.SCREEN_WIDTH // 2)
    y: float = float(config.BALL_BOTTOM_POSITION)
    dx: float = float(config.BALL_DEFAULT_DX)
    dy: float = float(config.BALL_DEFAULT_DY)
    radius: float = float(config.BALL_DEFAULT_RADIUS)
    speed: float = float(config.BALL_DEFAULT_SPEED)

    def update(self) -> None:
        """Move one step along the direction at the current speed."""
        self.x += self.dx * self.speed
        self.y += self.dy * self.speed

    def is_lost(self) -> bool:
        """Whether the ball has left the bottom of the screen."""
        return self.y - self.radius > config.SCREEN_HEIGHT

    def reset(self, direction: bool = True) -> None:
        """Restore radius and speed, and the direction unless told not to."""
        if direction:
            self.dx = float(config.BALL_DEFAULT_DX)
            self.dy = float(config.BALL_DEFAULT_DY)
        self.radius = float(config.BALL_DEFAULT_RADIUS)
        self.speed = float(config.BALL_DEFAULT_SPEED)

    def place(self, x: float, y: float = float(config.BALL_BOTTOM_POSITION)) -> None:
        """Put the ball at the given point."""
        self.x = x
        self.y = y


@dataclass
class Balls:
    """The balls currently in play."""

    balls: list = field(default_factory=list)

    def create(self, x: float = 0.0, y: float = 0.0, dx: float = 0.0, dy: float = 0.0) -> Ball:
        """Add a ball at the given point and direction and return it."""
        ball = Ball(x=x, y=y, dx=dx, dy=dy)
        self.balls.append(ball)
        return ball

    def remove(self, ball: Ball) -> None:
        """Take this very ball out of play; unknown balls are ignored."""
        self.balls = [other for other in self.balls if other is not ball]

    def reset(self) -> None:
        """Remove every ball."""
        self.balls.clear()

    def __iter__(self):
        return iter(list(self.balls))

    def __len__(self) -> int:
        return len(self.balls)

    def __getitem__(self, index: int) -> Ball:
        return self.balls[index]