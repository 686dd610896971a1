"""Drawing the game and reading the keyboard and mouse with pygame."""

import pygame

from arkanoid import config
from arkanoid.brick import BrickColor
from arkanoid.collisions import brick_rect
from arkanoid.controller import InputState, Key
from arkanoid.levels import load_score
from arkanoid.powerups import PowerType
from arkanoid.states import GameState

_BASE_FONT_SIZE = 12

_KEY_CODES = {
    Key.SPACE: pygame.K_SPACE,
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.K: pygame.K_k,
    Key.L: pygame.K_l,
    Key.R: pygame.K_r,
    Key.DIGIT_0: pygame.K_0,
    Key.DIGIT_1: pygame.K_1,
    Key.DIGIT_2: pygame.K_2,
    Key.DIGIT_3: pygame.K_3,
}


class GameScreen:
    """The game window: draws the current screen and reads the input."""

    def __init__(self, surface=None) -> None:
        pygame.init()
        pygame.font.init()
        if surface is None:
            surface = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
            pygame.display.set_caption("Arkanoid")
            self._owns_display = True
        else:
            self._owns_display = False
        self.surface = surface
        self.closed = False
        self._fonts = {}

    def __enter__(self) -> "GameScreen":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- drawing -----------------------------------------------------------

    def draw(self, control) -> None:
        """Draw the screen that matches the game's current state."""
        if control.state is GameState.IN_GAME:
            self._draw_in_game(control)
        elif control.state is GameState.END_GAME:
            self._draw_end_game(control.stats)
        else:
            self._draw_welcome()
        if self._owns_display:
            pygame.display.flip()

    def _draw_in_game(self, control) -> None:
        surface = self.surface
        surface.fill(config.BACKGROUND_RGB)

        for row, column, brick in control.board:
            rect = brick_rect(row, column, brick)
            power_up = brick.power_up
            if not brick.destroyed and brick.color is not BrickColor.NONE:
                area = pygame.Rect(int(rect.left), int(rect.top), brick.width, brick.height)
                pygame.draw.rect(surface, brick.rgb, area)
                pygame.draw.rect(surface, config.BACKGROUND_RGB, area, 2)
                letter = config.POWER_UP_LETTERS.get(int(power_up.type), "")
                if letter:
                    self._draw_centered(letter, area.centerx, area.centery, config.BACKGROUND_RGB)
            elif power_up.type is not PowerType.NONE:
                pygame.draw.circle(
                    surface, config.PURPLE_UP_RGB, (power_up.x, power_up.y), power_up.speed
                )

        racket = control.racket
        pygame.draw.rect(
            surface,
            config.WHITE_RGB,
            pygame.Rect(int(racket.x), int(racket.y), racket.width, racket.height),
        )

        for ball in control.balls:
            if not ball.is_lost():
                pygame.draw.circle(surface, config.WHITE_RGB, (ball.x, ball.y), ball.radius)

        for laser in control.lasers:
            left, top = int(laser.x1), int(laser.y1)
            width = max(1, int(laser.x2) - left)
            height = max(1, int(laser.y2) - top)
            pygame.draw.rect(surface, config.RED_RGB, pygame.Rect(left, top, width, height))

        self._draw_status_bar(control)

    def _draw_status_bar(self, control) -> None:
        surface = self.surface
        width, height = config.SCREEN_WIDTH, config.SCREEN_HEIGHT
        line = config.SEPARATION_LINE_HEIGHT
        pygame.draw.line(surface, config.WHITE_RGB, (0, line), (width, line), 1)
        pygame.draw.line(surface, config.WHITE_RGB, (0, 0), (width, 0), 2)
        pygame.draw.line(surface, config.WHITE_RGB, (0, 0), (0, height), 2)
        pygame.draw.line(surface, config.WHITE_RGB, (width, 0), (width, height), 2)

        gap = config.UI_TEXT_INFO_WIDTH_BETWEEN_WALLS
        top = config.UI_TEXT_INFO_HEIGHT
        level_number = control.board.level_number
        best = load_score(config.best_score_path(level_number, control.directory))

        self._draw_text(f"Score: {control.stats.score}", 2, gap, top)
        self._draw_text(f"Best Score: {best}", 2, gap * 7, top)
        self._draw_text(f"Level: {level_number}", 2, gap * 17, top)
        scaled_width = self._text_width("Lives:  ") * 2
        self._draw_text(
            f"Lives: {control.stats.lives}", 2, (width - scaled_width) // 2 - gap, top
        )

    def _draw_welcome(self) -> None:
        self.surface.fill(config.BACKGROUND_RGB)
        self._draw_title("WELCOME TO ARKANOID", "Press any key to start")

    def _draw_end_game(self, stats) -> None:
        self.surface.fill(config.BACKGROUND_RGB)
        if stats.game_over:
            self._draw_title("GAME OVER", "Press any key to restart")
        else:
            self._draw_title("VICTORY", "Press any key to go next level")

    def _draw_title(self, title: str, subtitle: str) -> None:
        width, height = config.SCREEN_WIDTH, config.SCREEN_HEIGHT
        title_width = self._text_width(title) * 3
        self._draw_text(title, 3, (width - title_width) // 6, height // 6)
        subtitle_width = self._text_width(subtitle) * 2
        self._draw_text(
            subtitle,
            2,
            (width - subtitle_width) // 4,
            height // 4 + config.UI_TEXT_INFO_HEIGHT * 2,
        )

    # -- text --------------------------------------------------------------

    def _font(self, scale: int) -> pygame.font.Font:
        if scale not in self._fonts:
            self._fonts[scale] = pygame.font.Font(None, _BASE_FONT_SIZE * scale)
        return self._fonts[scale]

    def _text_width(self, text: str) -> int:
        return self._font(1).size(text)[0]

    def _draw_text(self, text: str, scale: int, x: float, y: float, color=config.WHITE_RGB) -> None:
        """Draw text whose position is given in coordinates divided by ``scale``."""
        rendered = self._font(scale).render(text, True, color)
        self.surface.blit(rendered, (int(x * scale), int(y * scale)))

    def _draw_centered(self, text: str, x: int, y: int, color) -> None:
        rendered = self._font(1).render(text, True, color)
        self.surface.blit(rendered, rendered.get_rect(center=(x, y)))

    # -- input -------------------------------------------------------------

    def read_input(self) -> InputState:
        """Return the keys held down and the pointer position of this frame."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
        pressed = pygame.key.get_pressed()
        keys = {key for key, code in _KEY_CODES.items() if pressed[code]}
        if not keys and any(pressed):
            keys.add(Key.OTHER)
        mouse_x = pygame.mouse.get_pos()[0]
        return InputState(frozenset(keys), mouse_x)

    def close(self) -> None:
        """Close the window if this screen opened it."""
        if self._owns_display and not self.closed:
            pygame.display.quit()
        self.closed = True