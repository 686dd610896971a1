"""The screens the game can be showing."""

import enum


class GameState(enum.Enum):
    """Which screen is displayed and which input handling applies."""

    WELCOME = enum.auto()
    IN_GAME = enum.auto()
    END_GAME = enum.auto()