"""The board: the bricks of the current level."""

import copy


class Board:
    """Bricks of the level being played and a pristine copy to restart from."""

    def __init__(self, level=None, level_number: int = 0) -> None:
        self.level_number = level_number
        self._original = copy.deepcopy(list(level or []))
        self.bricks = copy.deepcopy(self._original)

    @property
    def width(self) -> int:
        """Number of bricks in a row."""
        return len(self.bricks[0]) if self.bricks else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.bricks)

    def change_level(self, level, level_number: int) -> None:
        """Switch to another level; resets will go back to it."""
        self._original = copy.deepcopy(list(level))
        self.bricks = copy.deepcopy(self._original)
        self.level_number = level_number

    def reset(self) -> None:
        """Restore every brick of the current level as it was loaded."""
        self.bricks = copy.deepcopy(self._original)

    def __iter__(self):
        """Yield ``(row, column, brick)`` for every brick."""
        for row_index, row in enumerate(self.bricks):
            for column_index, brick in enumerate(row):
                yield row_index, column_index, brick