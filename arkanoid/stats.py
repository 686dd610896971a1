"""Score, lives and the outcome of the last game."""

from dataclasses import dataclass

from arkanoid.config import DEFAULT_NUMBER_OF_LIVES


@dataclass
class GameStats:
    """Current score and lives, and whether the last game was lost."""

    score: int = 0
    lives: int = DEFAULT_NUMBER_OF_LIVES
    game_over: bool = False

    def add_score(self, points: int) -> None:
        """Add points to the score."""
        self.score += points

    def lose_life(self) -> None:
        """Take one life away."""
        self.lives -= 1

    def gain_life(self) -> None:
        """Give one extra life."""
        self.lives += 1

    def reset(self) -> None:
        """Start again from no score and the default number of lives."""
        self.score = 0
        self.lives = DEFAULT_NUMBER_OF_LIVES