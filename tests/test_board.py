from arkanoid.board import Board
from arkanoid.brick import Brick, BrickColor
from arkanoid.powerups import PowerType, PowerUp


def _level(rows, columns, color=BrickColor.WHITE):
    return [[Brick(color) for _ in range(columns)] for _ in range(rows)]


def test_dimensions_follow_the_level():
    board = Board(_level(3, 5), 2)
    assert (board.width, board.height) == (5, 3)
    assert board.level_number == 2


def test_empty_board_has_no_size():
    board = Board()
    assert (board.width, board.height) == (0, 0)
    assert board.level_number == 0
    assert list(board) == []


def test_reset_restores_hit_bricks():
    board = Board(_level(1, 2))
    board.bricks[0][0].hit(10.0, 10.0)
    assert board.bricks[0][0].destroyed
    board.reset()
    assert not board.bricks[0][0].destroyed
    assert board.bricks[0][0].color is BrickColor.WHITE


def test_reset_can_be_repeated():
    board = Board(_level(1, 1))
    for _ in range(2):
        board.bricks[0][0].hit(0.0, 0.0)
        board.reset()
    assert not board.bricks[0][0].destroyed


def test_reset_restores_power_ups():
    brick = Brick(BrickColor.RED, PowerUp(PowerType.LASER))
    board = Board([[brick]])
    board.bricks[0][0].power_up.destroy()
    board.reset()
    assert board.bricks[0][0].power_up.type is PowerType.LASER


def test_change_level_switches_bricks_and_number():
    board = Board(_level(1, 1), 0)
    board.change_level(_level(2, 4, BrickColor.GOLD), 3)
    assert (board.width, board.height) == (4, 2)
    assert board.level_number == 3
    board.bricks[1][1].hit(0.0, 0.0)
    board.reset()
    assert all(brick.color is BrickColor.GOLD for _, _, brick in board)


def test_board_does_not_share_bricks_with_the_level_given():
    level = _level(1, 1)
    board = Board(level)
    board.bricks[0][0].hit(0.0, 0.0)
    assert not level[0][0].destroyed


def test_iteration_yields_positions():
    board = Board(_level(2, 3))
    positions = [(row, column) for row, column, _ in board]
    assert positions == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]