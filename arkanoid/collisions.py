"""Geometry of the game: walls, racket, bricks, lasers and power-ups."""

import math
from dataclasses import dataclass

from arkanoid import config
from arkanoid.brick import BrickColor


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def center_x(self) -> float:
        return self.left + (self.right - self.left) / 2.0

    @property
    def center_y(self) -> float:
        return self.top + (self.bottom - self.top) / 2.0


def brick_rect(row: int, column: int, brick) -> Rect:
    """Screen rectangle of the brick at ``row``, ``column``."""
    left = column * brick.width
    top = row * brick.height + config.SEPARATION_LINE_HEIGHT
    return Rect(left, top, left + brick.width, top + brick.height)


def wall_bounce(ball) -> bool:
    """Reverse the ball off a side wall or the status bar; report a bounce."""
    if ball.x + ball.radius >= config.SCREEN_WIDTH or ball.x - ball.radius <= 0:
        ball.dx = -ball.dx
        return True
    if ball.y - (ball.radius + ball.radius / 2) <= config.SEPARATION_LINE_HEIGHT:
        ball.dy = -ball.dy
        return True
    return False


def ball_hits_racket(ball, racket) -> bool:
    """Whether the bottom of the ball is on the racket."""
    bottom = ball.y + ball.radius
    return (
        racket.y <= bottom <= racket.y + racket.height
        and racket.x <= ball.x <= racket.x + racket.width
    )


def racket_bounce_direction(ball, racket) -> tuple:
    """Direction ``(dx, dy)`` of a ball bouncing off the racket.

    The middle of the racket sends the ball straight up; the nearer the
    edge, the flatter the angle, towards that edge's side.
    """
    hit_x = ball.x - racket.x
    middle = config.RACKET_DEFAULT_WIDTH // 2
    if hit_x == middle:
        return float(config.BALL_DEFAULT_DX), float(config.BALL_DEFAULT_DY)
    if hit_x < middle:
        angle = math.radians(30 + 120 * (1 - hit_x / racket.width))
        return math.cos(angle), -math.sin(angle)
    hit_x = racket.width - hit_x
    angle = math.radians(30 + 120 * (1 - hit_x / racket.width))
    return -math.cos(angle), -math.sin(angle)


def ball_brick_collision(ball, rect: Rect) -> tuple:
    """Whether the ball's next step hits ``rect``, as ``(horizontal, vertical)``.

    A horizontal hit reverses the ball's dx and a vertical one its dy;
    a corner hit reports both.
    """
    radius = ball.radius
    next_x = ball.x + ball.dx * ball.speed
    next_y = ball.y + ball.dy * ball.speed
    if not (
        next_x + radius >= rect.left
        and next_x - radius <= rect.right
        and next_y + radius >= rect.top
        and next_y - radius <= rect.bottom
    ):
        return False, False

    vertical = False
    horizontal = False
    if ball.x + radius >= rect.left and ball.x - radius <= rect.right:
        if (ball.dy > 0 and ball.y + radius <= rect.top) or (
            ball.dy < 0 and ball.y - radius >= rect.bottom
        ):
            vertical = True
    if ball.y + radius >= rect.top and ball.y - radius <= rect.bottom:
        if (ball.dx > 0 and ball.x + radius <= rect.left) or (
            ball.dx < 0 and ball.x - radius >= rect.right
        ):
            horizontal = True

    if not vertical and not horizontal:
        closest_x = max(rect.left, min(ball.x, rect.right))
        closest_y = max(rect.top, min(ball.y, rect.bottom))
        distance_x = ball.x - closest_x
        distance_y = ball.y - closest_y
        if distance_x * distance_x + distance_y * distance_y <= radius * radius:
            return True, True
    return horizontal, vertical


def laser_hits_rect(laser, rect: Rect) -> bool:
    """Whether the tip of the laser is inside ``rect``."""
    return rect.left <= laser.x1 <= rect.right and rect.top <= laser.y1 <= rect.bottom


def power_up_caught(power_up, racket) -> bool:
    """Whether a falling power-up touches the racket."""
    bottom = power_up.y + power_up.radius
    return (
        racket.y <= bottom <= racket.y + racket.height
        and power_up.x + power_up.radius >= racket.x
        and power_up.x - power_up.radius <= racket.x + racket.width
    )


def has_won(board) -> bool:
    """Whether every brick except the gold ones is destroyed."""
    return all(
        brick.destroyed or brick.color is BrickColor.GOLD
        for row in board.bricks
        for brick in row
    )