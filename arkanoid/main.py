"""Command that opens the game window and runs the game loop."""

import argparse
import logging
import sys

import pygame

from arkanoid import config
from arkanoid.controller import GameControl
from arkanoid.screen import GameScreen

FRAMES_PER_SECOND = 120

logger = logging.getLogger(__name__)


def build_control(directory=config.DEFAULT_LEVEL_DIRECTORY) -> GameControl:
    """Create the game with level 0 read from ``directory``."""
    return GameControl(directory=directory)


def _frame_count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("the number of frames cannot be negative")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arkanoid",
        description=(
            "Break the bricks. L leaves, R resets the best score, "
            "K switches keyboard/mouse control, 0-3 choose a level."
        ),
    )
    parser.add_argument(
        "--levels",
        default=str(config.DEFAULT_LEVEL_DIRECTORY),
        help="directory holding the level and best-score files",
    )
    parser.add_argument(
        "--frames",
        type=_frame_count,
        default=0,
        help="stop after this many frames (0 runs until the game is left)",
    )
    return parser


def main(argv=None) -> int:
    """Run the game; return the exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    logger.info("game starting")

    control = build_control(args.levels)
    try:
        screen = GameScreen()
    except pygame.error as error:
        print(f"cannot open the game window: {error}", file=sys.stderr)
        return 1

    clock = pygame.time.Clock()
    frames = 0
    with screen:
        while control.running and not screen.closed:
            control.process_inputs(screen.read_input())
            screen.draw(control)
            clock.tick(FRAMES_PER_SECOND)
            frames += 1
            if args.frames and frames >= args.frames:
                break

    logger.info("exiting game")
    return 0


if __name__ == "__main__":
    sys.exit(main())