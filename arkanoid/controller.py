"""Game rules: reacting to input, moving everything and resolving collisions."""

import enum
import logging
from dataclasses import dataclass

from arkanoid import config
from arkanoid.ball import Ball, Balls
from arkanoid.board import Board
from arkanoid.brick import Brick, BrickColor
from arkanoid.collisions import (
    Rect,
    ball_brick_collision,
    ball_hits_racket,
    brick_rect,
    has_won,
    laser_hits_rect,
    power_up_caught,
    racket_bounce_direction,
    wall_bounce,
)
from arkanoid.laser import Lasers
from arkanoid.levels import load_level, load_score, save_score
from arkanoid.powerups import PowerType
from arkanoid.racket import Racket
from arkanoid.states import GameState
from arkanoid.stats import GameStats

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    """Keys the game reacts to; any other key is OTHER."""

    SPACE = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    K = enum.auto()
    L = enum.auto()
    R = enum.auto()
    DIGIT_0 = enum.auto()
    DIGIT_1 = enum.auto()
    DIGIT_2 = enum.auto()
    DIGIT_3 = enum.auto()
    OTHER = enum.auto()


_LEVEL_KEYS = (Key.DIGIT_0, Key.DIGIT_1, Key.DIGIT_2, Key.DIGIT_3)


@dataclass(frozen=True)
class InputState:
    """Keys held down and the pointer's x position (None if unknown)."""

    keys: frozenset = frozenset()
    mouse_x: int | None = None

    @classmethod
    def pressed(cls, *keys: Key, mouse_x: int | None = None) -> "InputState":
        """Input with the given keys held down."""
        return cls(frozenset(keys), mouse_x)

    def is_down(self, key: Key) -> bool:
        """Whether ``key`` is held down."""
        return key in self.keys

    @property
    def any_key(self) -> bool:
        """Whether any key at all is held down."""
        return bool(self.keys)


class GameControl:
    """Owns the game objects and applies the rules of the game to them."""

    def __init__(
        self,
        board: Board | None = None,
        directory=config.DEFAULT_LEVEL_DIRECTORY,
        racket: Racket | None = None,
        balls: Balls | None = None,
        stats: GameStats | None = None,
        lasers: Lasers | None = None,
    ) -> None:
        self.directory = directory
        self.board = board if board is not None else Board(self._load_level(0), 0)
        self.racket = racket if racket is not None else Racket()
        self.balls = balls if balls is not None else Balls()
        self.stats = stats if stats is not None else GameStats()
        self.lasers = lasers if lasers is not None else Lasers()
        self.state = GameState.WELCOME
        self.running = True
        self.mouse_control = True
        self.space_pressed = False
        self.game_has_started = False
        self.laser_on = False
        self.release_ball = False
        self.ball_bounce = True
        self.power_interruption = False

    # -- main loop ---------------------------------------------------------

    def process_inputs(self, inputs: InputState) -> None:
        """Advance the game by one frame according to the current screen."""
        if self.state is GameState.WELCOME:
            if inputs.any_key:
                self.state = GameState.IN_GAME
        elif self.state is GameState.IN_GAME:
            if not self.game_has_started:
                ball = self.balls.create()
                ball.place(self.racket.x + self.racket.width // 2)
                ball.dx = float(config.BALL_DEFAULT_DX)
                ball.dy = float(config.BALL_DEFAULT_DY)
                self.game_has_started = True
            else:
                self.update()
                self._process_game_input(inputs)
        elif self.state is GameState.END_GAME:
            if inputs.any_key:
                self.state = GameState.IN_GAME

    def update(self) -> None:
        """Move balls and lasers, resolve collisions and detect a won level."""
        lost_balls = []
        for ball in self.balls:
            if ball.is_lost():
                lost_balls.append(ball)
            else:
                ball.update()
                if (
                    not wall_bounce(ball)
                    and ball.y >= config.SCREEN_HEIGHT
                ):
                    logger.info("a ball went out")
                self._check_racket_collision(ball)

        lost_lasers = []
        for laser in self.lasers:
            if laser.is_lost():
                lost_lasers.append(laser)
            else:
                laser.update()

        for ball in lost_balls:
            self._handle_ball_lost(ball)
        for laser in lost_lasers:
            self.lasers.remove(laser)

        self._check_brick_collisions()

        if has_won(self.board):
            self.stats.game_over = False
            self.save_best_score()
            self.reset_game()
            self.state = GameState.END_GAME
            next_level = (self.board.level_number + 1) % config.TOTAL_LEVELS
            self.board.change_level(self._load_level(next_level), next_level)

    def reset_game(self) -> None:
        """Start the current level over from scratch."""
        self.stats.reset()
        self.racket.reset()
        self.board.reset()
        self.balls.reset()
        self.lasers.reset()
        self.game_has_started = False
        self.release_ball = False
        self.ball_bounce = True
        self.power_interruption = False
        self.laser_on = False

    def save_best_score(self) -> None:
        """Record the current score if it beats the level's best."""
        path = config.best_score_path(self.board.level_number, self.directory)
        if load_score(path) < self.stats.score:
            self._store_score(self.stats.score, path)

    # -- input -------------------------------------------------------------

    def _process_game_input(self, inputs: InputState) -> None:
        racket_x = self.racket.x
        half_width = self.racket.width // 2

        self._move_racket(inputs)
        self._debug_inputs(inputs)

        if not self.release_ball:
            for ball in self.balls:
                delta = ball.x - (racket_x + half_width)
                ball.place(self.racket.x + half_width + delta)

        if inputs.is_down(Key.SPACE):
            if not self.space_pressed:
                self.release_ball = True
                if self.laser_on:
                    self.lasers.create(self.racket.x + half_width)
                    self.lasers.remaining -= 1
                    if self.lasers.remaining == 0:
                        self.lasers.remaining = config.DEFAULT_NUMBER_OF_LASER
                        self.laser_on = False
            self.space_pressed = True
        else:
            self.space_pressed = False

        if inputs.is_down(Key.L):
            self.running = False
            self.reset_game()

    def _move_racket(self, inputs: InputState) -> None:
        racket = self.racket
        racket_x = racket.x
        if self.mouse_control:
            if inputs.mouse_x is None:
                return
            new_x = int(inputs.mouse_x) - racket.width // 2
            if new_x < 0:
                new_x = 0
            if new_x + racket.width > config.SCREEN_WIDTH:
                new_x = config.SCREEN_WIDTH - racket.width
            racket.x = float(new_x)
        else:
            if inputs.is_down(Key.LEFT) and racket_x - racket.speed >= 0:
                racket.move_left()
            if (
                inputs.is_down(Key.RIGHT)
                and racket_x + racket.width + racket.speed <= config.SCREEN_WIDTH
            ):
                racket.move_right()

    def _debug_inputs(self, inputs: InputState) -> None:
        if inputs.is_down(Key.K):
            logger.info("switching racket control between keyboard and mouse")
            self.mouse_control = not self.mouse_control

        if inputs.is_down(Key.R):
            path = config.best_score_path(self.board.level_number, self.directory)
            self._store_score(0, path)
            logger.info("best score reset")

        for number, key in enumerate(_LEVEL_KEYS):
            if inputs.is_down(key):
                self.reset_game()
                self.board.change_level(self._load_level(number), number)
                logger.info("changed to level %d", number)

    # -- collisions --------------------------------------------------------

    def _check_racket_collision(self, ball: Ball) -> None:
        racket = self.racket
        if not ball_hits_racket(ball, racket):
            return
        ball.dx, ball.dy = racket_bounce_direction(ball, racket)

        if ball.speed < config.BALL_DEFAULT_SPEED:
            ball.speed = min(ball.speed + 0.5, float(config.BALL_DEFAULT_SPEED))
            logger.info("ball speeds up to %s", ball.speed)

        if racket.width > config.RACKET_DEFAULT_WIDTH:
            racket.width -= config.DEFAULT_RACKET_INCREASE

        if not self.ball_bounce:
            if ball.x + ball.radius >= racket.x + racket.width:
                ball.place(racket.x + racket.width - ball.radius)
            elif ball.x - ball.radius <= racket.x:
                ball.place(racket.x + ball.radius)
            ball.reset()
            self.release_ball = False
            self.ball_bounce = True

    def _check_brick_collisions(self) -> None:
        for row, column, brick in self.board:
            rect = brick_rect(row, column, brick)
            self._check_laser_hits(brick, rect)
            self._check_ball_hits(brick, rect)

    def _check_laser_hits(self, brick: Brick, rect: Rect) -> None:
        if brick.destroyed:
            return
        for laser in self.lasers:
            if laser_hits_rect(laser, rect):
                if brick.color is BrickColor.GOLD:
                    self.lasers.remove(laser)
                points = brick.points
                brick.hit(rect.center_x, rect.center_y, self.power_interruption)
                self.stats.add_score(points)
                break

    def _check_ball_hits(self, brick: Brick, rect: Rect) -> None:
        for ball in self.balls:
            if brick.destroyed:
                self._handle_power_up(brick, ball)
                return
            horizontal, vertical = ball_brick_collision(ball, rect)
            if horizontal or vertical:
                points = brick.points
                brick.hit(rect.center_x, rect.center_y, self.power_interruption)
                self.stats.add_score(points)
                if horizontal:
                    ball.dx = -ball.dx
                if vertical:
                    ball.dy = -ball.dy
                break

    # -- power-ups ---------------------------------------------------------

    def _handle_power_up(self, brick: Brick, ball: Ball) -> None:
        power_up = brick.power_up
        if self.power_interruption or power_up.type is PowerType.NONE:
            return

        power_up.update()
        if not power_up_caught(power_up, self.racket):
            return

        self.racket.reset()
        self.ball_bounce = True
        self.laser_on = False
        self.release_ball = True
        self.lasers.reset()

        kind = power_up.type
        if kind is PowerType.PLAYER:
            self.stats.gain_life()
            ball.reset(False)
            logger.info("picked an extra life")
        elif kind is PowerType.CATCH_BALL:
            ball.reset(False)
            self.ball_bounce = False
            logger.info("picked catch ball")
        elif kind is PowerType.INTERRUPTION:
            ball.reset(False)
            self.power_interruption = True
            for offset in range(1, config.DEFAULT_NUMBER_OF_BALLS):
                self.balls.create(ball.x + offset * 2, ball.y, ball.dx, ball.dy)
            logger.info("picked interruption")
        elif kind is PowerType.LASER:
            ball.reset(False)
            self.laser_on = True
            logger.info("picked laser")
        elif kind is PowerType.RACKET_GROW:
            ball.reset(False)
            self.racket.width += config.DEFAULT_RACKET_INCREASE * 3
            logger.info("picked racket grow")
        elif kind is PowerType.SLOW_DOWN:
            if ball.speed > 2:
                ball.speed -= 1
                logger.info("ball slowed down to %s", ball.speed)
        power_up.destroy()

    # -- game state --------------------------------------------------------

    def _handle_ball_lost(self, ball: Ball) -> None:
        if len(self.balls) > 1:
            self.balls.remove(ball)
            if len(self.balls) == 1:
                logger.info("interruption is over")
                self.power_interruption = False
        elif self.stats.lives > 1:
            self.stats.lose_life()
            ball.dx = float(config.BALL_DEFAULT_DX)
            ball.dy = float(config.BALL_DEFAULT_DY)
            ball.place(self.racket.x + self.racket.width // 2)
            self.release_ball = False
        else:
            logger.info("game over")
            self.save_best_score()
            self.state = GameState.END_GAME
            self.stats.game_over = True
            self.reset_game()
            self.release_ball = False

    def _load_level(self, number: int) -> list:
        path = config.level_path(number, self.directory)
        try:
            return load_level(path)
        except OSError as error:
            logger.error("cannot read level file %s: %s", path, error)
            return []

    @staticmethod
    def _store_score(score: int, path) -> None:
        try:
            save_score(score, path)
        except OSError as error:
            logger.error("cannot write score file %s: %s", path, error)