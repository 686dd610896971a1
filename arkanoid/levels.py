"""Reading level layouts and reading and writing best scores."""

import re
from pathlib import Path

from arkanoid.brick import Brick, BrickColor
from arkanoid.powerups import PowerUp

_EMPTY_CELL = "x"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _digit(char: str) -> int:
    return ord(char) - ord("0")


def _parse_row(line: str) -> list:
    cells = [char for char in line if char != " "]
    row = []
    # Each brick is two characters: colour, then power-up; a lone last one is ignored.
    for color_char, power_char in zip(cells[::2], cells[1::2]):
        if color_char == _EMPTY_CELL:
            color = BrickColor.NONE
        else:
            color = BrickColor(_digit(color_char))
        row.append(Brick(color, PowerUp(_digit(power_char))))
    return row


def parse_level(text: str) -> list:
    """Turn a level layout into rows of bricks.

    Every brick is a colour digit (or ``x`` for no brick) followed by a
    power-up digit; spaces are ignored and empty rows are skipped.
    Raises ValueError on an unknown colour or power-up.
    """
    return [row for row in map(_parse_row, text.splitlines()) if row]


def load_level(path) -> list:
    """Read and parse the level layout stored at ``path``."""
    return parse_level(Path(path).read_text(encoding="utf-8"))


def load_score(path) -> int:
    """Read the score stored at ``path``.

    A missing or empty file, or a value that does not fit in a 32-bit
    integer, counts as 0. Raises ValueError if the first line does not
    start with a number.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return 0
    lines = text.splitlines()
    if not lines:
        return 0
    match = _LEADING_INTEGER.match(lines[0])
    if match is None:
        raise ValueError(f"no score in {str(path)!r}: {lines[0]!r}")
    score = int(match.group(1))
    if not _INT_MIN <= score <= _INT_MAX:
        return 0
    return score


def save_score(score: int, path) -> None:
    """Store ``score`` at ``path``, replacing what was there."""
    Path(path).write_text(str(int(score)), encoding="utf-8")