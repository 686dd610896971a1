import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock

import pygame
import pytest

from arkanoid import config
from arkanoid.board import Board
from arkanoid.controller import GameControl, InputState, Key
from arkanoid.levels import parse_level
from arkanoid.screen import GameScreen
from arkanoid.states import GameState


class _Pressed:
    def __init__(self, codes):
        self._codes = set(codes)

    def __getitem__(self, code):
        return code in self._codes

    def __iter__(self):
        return iter([True] * len(self._codes))


@pytest.fixture
def screen():
    surface = pygame.Surface((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    return GameScreen(surface)


@pytest.fixture
def control(tmp_path):
    board = Board(parse_level("11 20\n"), 0)
    return GameControl(board=board, directory=tmp_path)


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def _white_pixels(surface):
    return pygame.mask.from_threshold(
        surface, config.WHITE_RGB + (255,), (1, 1, 1, 255)
    ).count()


def test_in_game_draws_bricks_racket_ball_and_laser(screen, control):
    control.state = GameState.IN_GAME
    control.balls.create(500.0, 500.0)
    control.lasers.create(300.0)
    screen.draw(control)
    surface = screen.surface
    assert _rgb(surface, (85, 70)) == config.CYAN_RGB
    assert _rgb(surface, (5, 70)) == config.ORANGE_RGB
    racket = control.racket
    assert _rgb(surface, (int(racket.x) + 5, int(racket.y) + 5)) == config.WHITE_RGB
    assert _rgb(surface, (500, 500)) == config.WHITE_RGB
    assert _rgb(surface, (300, 785)) == config.RED_RGB
    assert _rgb(surface, (400, 400)) == config.BACKGROUND_RGB


def test_released_power_up_is_drawn_where_it_falls(screen, control):
    control.state = GameState.IN_GAME
    brick = control.board.bricks[0][0]
    brick.hit(40.0, 75.0)
    screen.draw(control)
    assert _rgb(screen.surface, (40, 75)) == config.PURPLE_UP_RGB
    assert _rgb(screen.surface, (10, 70)) == config.BACKGROUND_RGB


def test_lost_ball_is_not_drawn(screen, control):
    control.state = GameState.IN_GAME
    ball = control.balls.create(500.0, 500.0)
    ball.place(500.0, float(config.SCREEN_HEIGHT + 50))
    screen.draw(control)
    assert _rgb(screen.surface, (500, 500)) == config.BACKGROUND_RGB


def test_bad_best_score_file_raises(screen, control, tmp_path):
    config.best_score_path(0, tmp_path).write_text("abc", encoding="utf-8")
    control.state = GameState.IN_GAME
    with pytest.raises(ValueError):
        screen.draw(control)


def test_welcome_screen_has_text_on_black(screen, control):
    screen.draw(control)
    assert _rgb(screen.surface, (0, 0)) == config.BACKGROUND_RGB
    assert _white_pixels(screen.surface) > 0


def test_end_screens_differ_between_defeat_and_victory(screen, control):
    control.state = GameState.END_GAME
    control.stats.game_over = True
    screen.draw(control)
    defeat = pygame.image.tobytes(screen.surface, "RGB")
    assert _white_pixels(screen.surface) > 0
    control.stats.game_over = False
    screen.draw(control)
    victory = pygame.image.tobytes(screen.surface, "RGB")
    assert _rgb(screen.surface, (0, 0)) == config.BACKGROUND_RGB
    assert defeat != victory


def test_read_input_maps_known_keys(screen):
    with mock.patch("pygame.key.get_pressed", return_value=_Pressed({pygame.K_SPACE, pygame.K_LEFT})), \
            mock.patch("pygame.mouse.get_pos", return_value=(123, 4)):
        inputs = screen.read_input()
    assert inputs == InputState(frozenset({Key.SPACE, Key.LEFT}), 123)


def test_read_input_reports_other_keys(screen):
    with mock.patch("pygame.key.get_pressed", return_value=_Pressed({pygame.K_a})), \
            mock.patch("pygame.mouse.get_pos", return_value=(7, 4)):
        inputs = screen.read_input()
    assert inputs.keys == frozenset({Key.OTHER})
    assert inputs.any_key


def test_read_input_without_keys(screen):
    with mock.patch("pygame.key.get_pressed", return_value=_Pressed(set())), \
            mock.patch("pygame.mouse.get_pos", return_value=(9, 4)):
        inputs = screen.read_input()
    assert not inputs.any_key
    assert inputs.mouse_x == 9


def test_quit_event_marks_screen_closed(screen):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    screen.read_input()
    assert screen.closed is True


def test_close_and_context_manager():
    surface = pygame.Surface((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    with GameScreen(surface) as screen:
        assert screen.closed is False
    assert screen.closed is True